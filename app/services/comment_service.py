# app/services/comment_service.py

from typing import Optional
from app.core.exceptions import NotFoundError
from app.models.comment import CommentModel
from app.schemas.content import Comment, CommentInsertForm, ContentUpdateForm
from app.services.base import BaseService


class CommentService(BaseService):

    async def create(self, form: CommentInsertForm, parent_path: Optional[str] = None) -> Comment:
        """댓글 작성 (parent_path 가 있으면 대댓글)"""
        with self._transaction() as db:
            comment_model = CommentModel(**form.model_dump(), removed=False, deleted=False)
            db.add(comment_model)
            db.flush()

            # id 가 나온 뒤에 경로 확정
            comment_model.path = f"{parent_path or '0'}.{comment_model.comment_id}"
            db.flush()
            return Comment.model_validate(comment_model)

    async def update(self, comment_id: int, form: ContentUpdateForm) -> Comment:
        """삭제/제거 플래그 수정"""
        with self._transaction() as db:
            comment_model = db.get(CommentModel, comment_id)
            if not comment_model:
                raise NotFoundError("댓글을 찾을 수 없습니다")

            for field, value in form.model_dump(exclude_none=True).items():
                setattr(comment_model, field, value)

            db.flush()
            return Comment.model_validate(comment_model)

    async def delete(self, comment_id: int) -> int:
        with self._transaction() as db:
            comment_model = db.get(CommentModel, comment_id)
            if not comment_model:
                return 0
            db.delete(comment_model)
            db.flush()
            return 1
