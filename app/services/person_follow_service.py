# app/services/person_follow_service.py

import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select, update, and_
from app.core.exceptions import NotFoundError
from app.models.person import PersonModel
from app.models.person_follow import PersonFollowModel
from app.schemas.person import Person
from app.schemas.person_follow import PersonFollower, PersonFollowerForm
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class PersonFollowService(BaseService):

    async def follow(self, form: PersonFollowerForm) -> PersonFollower:
        """팔로우 (같은 쌍이 있으면 덮어씀)"""
        values = {
            "follower_id": form.follower_id,
            "target_id": form.target_id,
            "followed": datetime.now(timezone.utc),
            "follow_pending": form.pending,
        }
        with self._transaction() as db:
            stmt = self._dialect_insert(db, PersonFollowModel).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[PersonFollowModel.follower_id, PersonFollowModel.target_id],
                set_={"followed": values["followed"], "follow_pending": values["follow_pending"]},
            )
            db.execute(stmt)

            follow = db.get(
                PersonFollowModel, (form.follower_id, form.target_id), populate_existing=True
            )
            logger.info(
                "Person %s follows %s (pending=%s)", form.follower_id, form.target_id, form.pending
            )
            return PersonFollower.model_validate(follow)

    async def follow_accepted(self, target_id: int, follower_id: int) -> PersonFollower:
        """원격 수락 처리용 자리. 인물 팔로우는 수락이 필요 없으므로 항상 NotFoundError"""
        raise NotFoundError("수락 대기 중인 팔로우가 없습니다")

    async def unfollow(self, form: PersonFollowerForm) -> int:
        """언팔로우 (행은 남기고 followed/follow_pending 을 비움). 바뀐 행 수 반환"""
        with self._transaction() as db:
            stmt = (
                update(PersonFollowModel)
                .where(
                    and_(
                        PersonFollowModel.follower_id == form.follower_id,
                        PersonFollowModel.target_id == form.target_id,
                        PersonFollowModel.followed.isnot(None),
                    )
                )
                .values(followed=None, follow_pending=None)
                .execution_options(synchronize_session=False)
            )
            count = db.execute(stmt).rowcount
            if count:
                logger.info("Person %s unfollowed %s", form.follower_id, form.target_id)
            return count

    async def read(self, follower_id: int, target_id: int) -> Optional[PersonFollower]:
        with self._transaction() as db:
            follow = db.get(PersonFollowModel, (follower_id, target_id))
            return PersonFollower.model_validate(follow) if follow else None

    async def list_followers(self, target_id: int) -> List[Person]:
        """팔로워 목록 (삭제된 인물 포함, 순서 보장 없음)"""
        with self._transaction() as db:
            stmt = (
                select(PersonModel)
                .join(PersonFollowModel, PersonFollowModel.follower_id == PersonModel.person_id)
                .where(
                    PersonFollowModel.target_id == target_id,
                    PersonFollowModel.followed.isnot(None),
                )
            )
            return [Person.model_validate(p) for p in db.execute(stmt).scalars()]

    async def list_following(self, follower_id: int) -> List[Person]:
        """팔로잉 목록"""
        with self._transaction() as db:
            stmt = (
                select(PersonModel)
                .join(PersonFollowModel, PersonFollowModel.target_id == PersonModel.person_id)
                .where(
                    PersonFollowModel.follower_id == follower_id,
                    PersonFollowModel.followed.isnot(None),
                )
            )
            return [Person.model_validate(p) for p in db.execute(stmt).scalars()]
