# app/schemas/person_follow.py

from typing import Optional
from pydantic import BaseModel, Field, computed_field, model_validator
from datetime import datetime
from enum import Enum


class FollowState(str, Enum):
    NOT_FOLLOWING = "not_following"
    PENDING = "pending"
    ACCEPTED = "accepted"


class PersonFollowerForm(BaseModel):
    follower_id: int = Field(description="팔로우하는 인물 ID")
    target_id: int = Field(description="팔로우 당하는 인물 ID")
    pending: bool = Field(default=False, description="원격 수락 대기 여부")


class PersonFollower(BaseModel):
    follower_id: int = Field(description="팔로우하는 인물 ID")
    target_id: int = Field(description="팔로우 당하는 인물 ID")
    followed: Optional[datetime] = Field(default=None, description="팔로우 시작일")
    follow_pending: Optional[bool] = Field(default=None, description="수락 대기 여부")

    @model_validator(mode="after")
    def check_state(self):
        if (self.followed is None) != (self.follow_pending is None):
            raise ValueError("followed 와 follow_pending 은 함께 비어 있어야 합니다")
        return self

    @computed_field
    @property
    def state(self) -> FollowState:
        if self.followed is None:
            return FollowState.NOT_FOLLOWING
        return FollowState.PENDING if self.follow_pending else FollowState.ACCEPTED

    class Config:
        from_attributes = True


class UnfollowResponse(BaseModel):
    count: int = Field(description="언팔로우된 관계 수 (0 또는 1)")
