# app/services/post_service.py

from app.core.exceptions import NotFoundError
from app.models.post import PostModel
from app.schemas.content import Post, PostInsertForm, ContentUpdateForm
from app.services.base import BaseService


class PostService(BaseService):

    async def create(self, form: PostInsertForm) -> Post:
        """게시글 작성"""
        with self._transaction() as db:
            post_model = PostModel(**form.model_dump(), removed=False, deleted=False)
            db.add(post_model)
            db.flush()
            return Post.model_validate(post_model)

    async def update(self, post_id: int, form: ContentUpdateForm) -> Post:
        """삭제/제거 플래그 수정"""
        with self._transaction() as db:
            post_model = db.get(PostModel, post_id)
            if not post_model:
                raise NotFoundError("게시글을 찾을 수 없습니다")

            for field, value in form.model_dump(exclude_none=True).items():
                setattr(post_model, field, value)

            db.flush()
            return Post.model_validate(post_model)

    async def delete(self, post_id: int) -> int:
        """게시글 삭제 (댓글, 좋아요 포함)"""
        with self._transaction() as db:
            post_model = db.get(PostModel, post_id)
            if not post_model:
                return 0
            db.delete(post_model)
            db.flush()
            return 1
