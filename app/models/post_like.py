# app/models/post_like.py

from sqlalchemy import Column, Integer, SmallInteger, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class PostLikeModel(Base):
    __tablename__ = "post_likes"

    post_id = Column(Integer, ForeignKey("posts.post_id", ondelete="CASCADE"), primary_key=True)
    person_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), primary_key=True
    )
    score = Column(SmallInteger, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp())

    def __repr__(self):
        return f"<PostLikeModel(person_id={self.person_id}, post_id={self.post_id})>"
