# app/services/like_service.py

from app.models.post_like import PostLikeModel
from app.models.comment_like import CommentLikeModel
from app.schemas.content import LikeForm
from app.services.base import BaseService


class LikeService(BaseService):
    """게시글/댓글 좋아요. 기존 투표는 지우고 새로 넣어 집계 이벤트가 양쪽 모두 발생하게 함"""

    async def like_post(self, form: LikeForm) -> None:
        with self._transaction() as db:
            existing = db.get(PostLikeModel, (form.target_id, form.person_id))
            if existing:
                db.delete(existing)
                db.flush()
            db.add(PostLikeModel(post_id=form.target_id, person_id=form.person_id, score=form.score))
            db.flush()

    async def remove_post_like(self, person_id: int, post_id: int) -> int:
        with self._transaction() as db:
            existing = db.get(PostLikeModel, (post_id, person_id))
            if not existing:
                return 0
            db.delete(existing)
            db.flush()
            return 1

    async def like_comment(self, form: LikeForm) -> None:
        with self._transaction() as db:
            existing = db.get(CommentLikeModel, (form.target_id, form.person_id))
            if existing:
                db.delete(existing)
                db.flush()
            db.add(
                CommentLikeModel(
                    comment_id=form.target_id, person_id=form.person_id, score=form.score
                )
            )
            db.flush()

    async def remove_comment_like(self, person_id: int, comment_id: int) -> int:
        with self._transaction() as db:
            existing = db.get(CommentLikeModel, (comment_id, person_id))
            if not existing:
                return 0
            db.delete(existing)
            db.flush()
            return 1
