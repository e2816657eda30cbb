# app/schemas/local_user.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class LocalUser(BaseModel):
    local_user_id: int = Field(description="로컬 사용자 ID")
    person_id: int = Field(description="인물 ID")
    email: Optional[str] = Field(default=None, description="이메일")
    published: datetime = Field(description="가입일시")

    class Config:
        from_attributes = True


class LocalUserInsertForm(BaseModel):
    person_id: int = Field(description="인물 ID")
    password_encrypted: str = Field(description="암호화된 비밀번호")
    email: Optional[str] = Field(default=None, description="이메일")
