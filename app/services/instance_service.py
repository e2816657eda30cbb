# app/services/instance_service.py

import logging
from sqlalchemy import select, delete, func
from app.models.instance import InstanceModel
from app.schemas.instance import Instance
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class InstanceService(BaseService):

    async def read_or_create(self, domain: str) -> Instance:
        """도메인으로 인스턴스 조회, 없으면 생성"""
        with self._transaction() as db:
            stmt = select(InstanceModel).where(
                func.lower(InstanceModel.domain) == func.lower(domain)
            )
            instance_model = db.execute(stmt).scalar_one_or_none()

            if not instance_model:
                instance_model = InstanceModel(domain=domain)
                db.add(instance_model)
                db.flush()
                logger.info("Registered instance %s", domain)

            return Instance.model_validate(instance_model)

    async def delete(self, instance_id: int) -> int:
        with self._transaction() as db:
            stmt = delete(InstanceModel).where(InstanceModel.instance_id == instance_id)
            return db.execute(stmt).rowcount
