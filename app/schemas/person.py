# app/schemas/person.py

from typing import Optional
from pydantic import BaseModel, Field, computed_field, field_validator
from datetime import datetime
from enum import Enum


class PersonState(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class Person(BaseModel):
    person_id: int = Field(description="인물 ID")
    name: str = Field(description="이름")
    display_name: Optional[str] = Field(default=None, description="표시 이름")
    avatar: Optional[str] = Field(default=None, description="아바타 URL")
    banner: Optional[str] = Field(default=None, description="배너 URL")
    bio: Optional[str] = Field(default=None, description="소개")
    matrix_user_id: Optional[str] = Field(default=None, description="Matrix 사용자 ID")
    ap_id: str = Field(description="연합 식별자 URL")
    inbox_url: str = Field(description="인박스 URL")
    public_key: str = Field(description="공개키")
    private_key: Optional[str] = Field(default=None, description="개인키 (로컬 인물만)")
    local: bool = Field(description="로컬 인물 여부")
    bot_account: bool = Field(default=False, description="봇 계정 여부")
    banned: bool = Field(default=False, description="차단 여부")
    ban_expires: Optional[datetime] = Field(default=None, description="차단 만료일시")
    deleted: bool = Field(default=False, description="삭제 여부")
    instance_id: int = Field(description="소속 인스턴스 ID")
    post_count: int = Field(default=0, description="게시글 수")
    post_score: int = Field(default=0, description="게시글 점수")
    comment_count: int = Field(default=0, description="댓글 수")
    comment_score: int = Field(default=0, description="댓글 점수")
    published: datetime = Field(description="생성일시")
    updated: Optional[datetime] = Field(default=None, description="수정일시")
    last_refreshed_at: datetime = Field(description="마지막 연합 갱신일시")

    @computed_field
    @property
    def state(self) -> PersonState:
        return PersonState.DELETED if self.deleted else PersonState.ACTIVE

    class Config:
        from_attributes = True


class PersonInsertForm(BaseModel):
    """None 인 필드는 '없음'으로 취급 (insert 시 DB 기본값, upsert 시 기존 값 유지)"""
    name: str = Field(description="이름", min_length=1, max_length=255)
    public_key: str = Field(description="공개키")
    instance_id: int = Field(description="소속 인스턴스 ID")
    display_name: Optional[str] = Field(default=None, description="표시 이름")
    avatar: Optional[str] = Field(default=None, description="아바타 URL")
    banner: Optional[str] = Field(default=None, description="배너 URL")
    bio: Optional[str] = Field(default=None, description="소개")
    matrix_user_id: Optional[str] = Field(default=None, description="Matrix 사용자 ID")
    ap_id: Optional[str] = Field(default=None, description="연합 식별자 URL")
    inbox_url: Optional[str] = Field(default=None, description="인박스 URL")
    private_key: Optional[str] = Field(default=None, description="개인키")
    local: Optional[bool] = Field(default=None, description="로컬 인물 여부")
    bot_account: Optional[bool] = Field(default=None, description="봇 계정 여부")
    banned: Optional[bool] = Field(default=None, description="차단 여부")
    ban_expires: Optional[datetime] = Field(default=None, description="차단 만료일시")
    published: Optional[datetime] = Field(default=None, description="생성일시")
    updated: Optional[datetime] = Field(default=None, description="수정일시")
    last_refreshed_at: Optional[datetime] = Field(default=None, description="마지막 연합 갱신일시")


class PersonUpdateForm(BaseModel):
    """명시적으로 넘긴 필드만 반영. 선택 항목은 None 으로 비울 수 있고 필수 항목은 None 불가"""
    name: Optional[str] = Field(default=None, description="이름", min_length=1, max_length=255)
    display_name: Optional[str] = Field(default=None, description="표시 이름")
    avatar: Optional[str] = Field(default=None, description="아바타 URL")
    banner: Optional[str] = Field(default=None, description="배너 URL")
    bio: Optional[str] = Field(default=None, description="소개")
    matrix_user_id: Optional[str] = Field(default=None, description="Matrix 사용자 ID")
    ap_id: Optional[str] = Field(default=None, description="연합 식별자 URL")
    inbox_url: Optional[str] = Field(default=None, description="인박스 URL")
    public_key: Optional[str] = Field(default=None, description="공개키")
    private_key: Optional[str] = Field(default=None, description="개인키")
    bot_account: Optional[bool] = Field(default=None, description="봇 계정 여부")
    banned: Optional[bool] = Field(default=None, description="차단 여부")
    ban_expires: Optional[datetime] = Field(default=None, description="차단 만료일시")
    updated: Optional[datetime] = Field(default=None, description="수정일시")
    last_refreshed_at: Optional[datetime] = Field(default=None, description="마지막 연합 갱신일시")

    @field_validator(
        "name", "ap_id", "inbox_url", "public_key", "bot_account", "banned", "last_refreshed_at"
    )
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("비울 수 없는 필드입니다")
        return value


class UsernameAvailability(BaseModel):
    name: str = Field(description="확인한 이름")
    available: bool = Field(description="사용 가능 여부")
