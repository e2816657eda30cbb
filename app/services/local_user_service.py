# app/services/local_user_service.py

from typing import Optional
from sqlalchemy import select
from app.models.local_user import LocalUserModel
from app.schemas.local_user import LocalUser, LocalUserInsertForm
from app.services.base import BaseService


class LocalUserService(BaseService):

    async def create(self, form: LocalUserInsertForm) -> LocalUser:
        """로컬 사용자(계정) 생성"""
        with self._transaction() as db:
            local_user_model = LocalUserModel(**form.model_dump())
            db.add(local_user_model)
            db.flush()
            return LocalUser.model_validate(local_user_model)

    async def read_by_person(self, person_id: int) -> Optional[LocalUser]:
        with self._transaction() as db:
            stmt = select(LocalUserModel).where(LocalUserModel.person_id == person_id)
            local_user_model = db.execute(stmt).scalar_one_or_none()
            return LocalUser.model_validate(local_user_model) if local_user_model else None
