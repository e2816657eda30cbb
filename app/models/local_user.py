# app/models/local_user.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class LocalUserModel(Base):
    __tablename__ = "local_users"

    local_user_id = Column(Integer, primary_key=True, autoincrement=True)
    person_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), unique=True, nullable=False
    )
    email = Column(String(255), unique=True, nullable=True)
    password_encrypted = Column(String(255), nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)

    def __repr__(self):
        return f"<LocalUserModel(id={self.local_user_id}, person_id={self.person_id})>"
