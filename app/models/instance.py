# app/models/instance.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base


class InstanceModel(Base):
    __tablename__ = "instances"

    instance_id = Column(Integer, primary_key=True, autoincrement=True)
    domain = Column(String(255), unique=True, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)
    updated = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<InstanceModel(id={self.instance_id}, domain='{self.domain}')>"
