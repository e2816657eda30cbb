# app/schemas/instance.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class Instance(BaseModel):
    instance_id: int = Field(description="인스턴스 ID")
    domain: str = Field(description="도메인")
    published: datetime = Field(description="생성일시")
    updated: Optional[datetime] = Field(default=None, description="수정일시")

    class Config:
        from_attributes = True
