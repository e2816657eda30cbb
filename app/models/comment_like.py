# app/models/comment_like.py

from sqlalchemy import Column, Integer, SmallInteger, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class CommentLikeModel(Base):
    __tablename__ = "comment_likes"

    comment_id = Column(
        Integer, ForeignKey("comments.comment_id", ondelete="CASCADE"), primary_key=True
    )
    person_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), primary_key=True
    )
    score = Column(SmallInteger, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp())

    def __repr__(self):
        return f"<CommentLikeModel(person_id={self.person_id}, comment_id={self.comment_id})>"
