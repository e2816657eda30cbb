# app/models/person.py

import uuid
from sqlalchemy import Column, Integer, BigInteger, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


CHANGEME_PREFIX = "http://changeme.invalid/"


def generate_unique_changeme() -> str:
    """연합 URL이 아직 없을 때 쓰는 임시 고유 URL"""
    return f"{CHANGEME_PREFIX}{uuid.uuid4().hex}"


class PersonModel(Base):
    __tablename__ = "persons"

    person_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=True)
    avatar = Column(Text, nullable=True)
    banner = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    matrix_user_id = Column(Text, nullable=True)

    # 연합 식별자 (upsert 키)
    ap_id = Column(String(255), unique=True, nullable=False, default=generate_unique_changeme)
    inbox_url = Column(String(255), nullable=False, default=generate_unique_changeme)
    public_key = Column(Text, nullable=False)
    private_key = Column(Text, nullable=True)

    local = Column(Boolean, default=True, nullable=False)
    bot_account = Column(Boolean, default=False, nullable=False)
    banned = Column(Boolean, default=False, nullable=False)
    ban_expires = Column(DateTime(timezone=True), nullable=True)
    deleted = Column(Boolean, default=False, nullable=False)

    instance_id = Column(
        Integer, ForeignKey("instances.instance_id", ondelete="CASCADE"), nullable=False
    )

    # 집계 카운터 (aggregates 모듈만 갱신)
    post_count = Column(BigInteger, default=0, nullable=False)
    post_score = Column(BigInteger, default=0, nullable=False)
    comment_count = Column(BigInteger, default=0, nullable=False)
    comment_score = Column(BigInteger, default=0, nullable=False)

    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)
    updated = Column(DateTime(timezone=True), nullable=True)
    last_refreshed_at = Column(
        DateTime(timezone=True), default=func.current_timestamp(), nullable=False
    )

    def __repr__(self):
        return f"<PersonModel(id={self.person_id}, name='{self.name}')>"
