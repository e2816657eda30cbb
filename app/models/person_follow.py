# app/models/person_follow.py

from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, CheckConstraint, Index
from app.database import Base


class PersonFollowModel(Base):
    __tablename__ = "person_follows"

    # follower_id 가 target_id 를 팔로우
    follower_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), primary_key=True
    )
    target_id = Column(
        Integer, ForeignKey("persons.person_id", ondelete="CASCADE"), primary_key=True
    )
    followed = Column(DateTime(timezone=True), nullable=True)
    follow_pending = Column(Boolean, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "(followed IS NULL) = (follow_pending IS NULL)", name="ck_person_follow_state"
        ),
        Index("idx_person_follows_target", "target_id"),
    )

    def __repr__(self):
        return (
            f"<PersonFollowModel(follower_id={self.follower_id}, target_id={self.target_id})>"
        )
