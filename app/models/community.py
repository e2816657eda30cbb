# app/models/community.py

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base
from app.models.person import generate_unique_changeme


class CommunityModel(Base):
    __tablename__ = "communities"

    community_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    ap_id = Column(String(255), unique=True, nullable=False, default=generate_unique_changeme)
    public_key = Column(Text, nullable=False)
    instance_id = Column(
        Integer, ForeignKey("instances.instance_id", ondelete="CASCADE"), nullable=False
    )
    local = Column(Boolean, default=True, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    removed = Column(Boolean, default=False, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)

    def __repr__(self):
        return f"<CommunityModel(id={self.community_id}, name='{self.name}')>"
