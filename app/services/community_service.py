# app/services/community_service.py

from typing import Optional
from sqlalchemy import select, delete
from app.core.exceptions import NotFoundError
from app.models.community import CommunityModel
from app.models.post import PostModel
from app.schemas.content import Community, CommunityInsertForm
from app.services.base import BaseService


class CommunityService(BaseService):

    async def create(self, form: CommunityInsertForm) -> Community:
        """커뮤니티 생성"""
        with self._transaction() as db:
            community_model = CommunityModel(**form.model_dump())
            db.add(community_model)
            db.flush()
            return Community.model_validate(community_model)

    async def set_flags(
        self, community_id: int, deleted: Optional[bool] = None, removed: Optional[bool] = None
    ) -> Community:
        """삭제/제거 플래그 변경"""
        with self._transaction() as db:
            community_model = db.get(CommunityModel, community_id)
            if not community_model:
                raise NotFoundError("커뮤니티를 찾을 수 없습니다")
            if deleted is not None:
                community_model.deleted = deleted
            if removed is not None:
                community_model.removed = removed
            db.flush()
            return Community.model_validate(community_model)

    async def delete(self, community_id: int) -> int:
        """커뮤니티 삭제. 게시글은 ORM 으로 먼저 지워 작성자 카운터를 되돌림"""
        with self._transaction() as db:
            if not db.get(CommunityModel, community_id):
                return 0

            self._delete_each(db, select(PostModel).where(PostModel.community_id == community_id))

            stmt = delete(CommunityModel).where(CommunityModel.community_id == community_id)
            return db.execute(stmt).rowcount
