# app/schemas/content.py

from typing import Optional
from pydantic import BaseModel, Field


class Community(BaseModel):
    community_id: int = Field(description="커뮤니티 ID")
    name: str = Field(description="이름")
    title: str = Field(description="제목")
    instance_id: int = Field(description="인스턴스 ID")
    local: bool = Field(description="로컬 커뮤니티 여부")
    deleted: bool = Field(description="삭제 여부")
    removed: bool = Field(description="관리자 제거 여부")

    class Config:
        from_attributes = True


class CommunityInsertForm(BaseModel):
    instance_id: int = Field(description="인스턴스 ID")
    name: str = Field(description="이름", min_length=1)
    title: str = Field(description="제목")
    public_key: str = Field(description="공개키")
    local: bool = Field(default=True, description="로컬 커뮤니티 여부")


class Post(BaseModel):
    post_id: int = Field(description="게시글 ID")
    name: str = Field(description="제목")
    creator_id: int = Field(description="작성자 ID")
    community_id: int = Field(description="커뮤니티 ID")
    removed: bool = Field(description="관리자 제거 여부")
    deleted: bool = Field(description="삭제 여부")

    class Config:
        from_attributes = True


class PostInsertForm(BaseModel):
    name: str = Field(description="제목", min_length=1)
    creator_id: int = Field(description="작성자 ID")
    community_id: int = Field(description="커뮤니티 ID")


class Comment(BaseModel):
    comment_id: int = Field(description="댓글 ID")
    creator_id: int = Field(description="작성자 ID")
    post_id: int = Field(description="게시글 ID")
    content: str = Field(description="댓글 내용")
    path: str = Field(description="댓글 경로")
    removed: bool = Field(description="관리자 제거 여부")
    deleted: bool = Field(description="삭제 여부")

    class Config:
        from_attributes = True


class CommentInsertForm(BaseModel):
    creator_id: int = Field(description="작성자 ID")
    post_id: int = Field(description="게시글 ID")
    content: str = Field(description="댓글 내용", min_length=1)


class ContentUpdateForm(BaseModel):
    removed: Optional[bool] = Field(default=None, description="관리자 제거 여부")
    deleted: Optional[bool] = Field(default=None, description="삭제 여부")


class LikeForm(BaseModel):
    target_id: int = Field(description="게시글 또는 댓글 ID")
    person_id: int = Field(description="좋아요 누른 인물 ID")
    score: int = Field(description="점수 (1 또는 -1)", ge=-1, le=1)
