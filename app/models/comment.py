# app/models/comment.py

from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class CommentModel(Base):
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    creator_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), nullable=False
    )
    post_id = Column(Integer, ForeignKey("posts.post_id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)
    # "0.부모id.자기id" 형태의 경로
    path = Column(Text, nullable=False, default="0")

    removed = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)

    def __repr__(self):
        return f"<CommentModel(id={self.comment_id}, post_id={self.post_id})>"
