# app/models/post.py

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class PostModel(Base):
    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    creator_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), nullable=False
    )
    community_id = Column(
        Integer, ForeignKey("communities.community_id", ondelete="CASCADE"), nullable=False
    )
    removed = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    published = Column(DateTime(timezone=True), default=func.current_timestamp(), nullable=False)

    # 게시글 삭제 시 댓글/좋아요도 ORM 단위로 삭제 (집계 이벤트 발생)
    comments = relationship("CommentModel", cascade="all, delete-orphan")
    likes = relationship("PostLikeModel", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<PostModel(id={self.post_id}, name='{self.name}')>"
