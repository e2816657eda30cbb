# app/services/person_service.py

import logging
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import unquote
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError
from sqlalchemy import select, update, delete, exists, func, and_, union
from app.core.config import Settings, get_settings
from app.core.exceptions import (
    ImmutableFieldError,
    NotFoundError,
    UrlConstructionError,
    UsernameAlreadyExistsError,
)
from app.models.person import CHANGEME_PREFIX, PersonModel
from app.models.local_user import LocalUserModel
from app.models.instance import InstanceModel
from app.models.community import CommunityModel
from app.models.post import PostModel
from app.models.comment import CommentModel
from app.models.post_like import PostLikeModel
from app.models.comment_like import CommentLikeModel
from app.schemas.person import Person, PersonInsertForm, PersonUpdateForm
from app.services.base import BaseService

logger = logging.getLogger(__name__)

_http_url = TypeAdapter(AnyHttpUrl)


def mark_deleted(person: PersonModel) -> None:
    """ACTIVE -> DELETED 전이. deleted=True 를 쓰는 유일한 경로"""
    person.display_name = None
    person.avatar = None
    person.banner = None
    person.bio = None
    person.matrix_user_id = None
    person.deleted = True
    person.updated = datetime.now(timezone.utc)


def _visible_local_community():
    return and_(
        CommunityModel.local.is_(True),
        CommunityModel.deleted.is_(False),
        CommunityModel.removed.is_(False),
    )


class PersonService(BaseService):

    async def read(self, person_id: int) -> Person:
        """인물 조회 (삭제된 인물 제외)"""
        with self._transaction() as db:
            stmt = select(PersonModel).where(
                PersonModel.person_id == person_id, PersonModel.deleted.is_(False)
            )
            person_model = db.execute(stmt).scalar_one_or_none()
            if not person_model:
                raise NotFoundError("인물을 찾을 수 없습니다")
            return Person.model_validate(person_model)

    async def create(self, form: PersonInsertForm) -> Person:
        """인물 생성 (ap_id 중복 시 UniqueViolationError)"""
        with self._transaction() as db:
            person_model = PersonModel(**form.model_dump(exclude_none=True))
            db.add(person_model)
            db.flush()
            logger.info("Created person %s (%s)", person_model.person_id, person_model.ap_id)
            return Person.model_validate(person_model)

    async def update(self, person_id: int, form: PersonUpdateForm) -> Person:
        """넘긴 필드만 수정. ap_id 는 임시 URL 일 때만 바꿀 수 있음"""
        with self._transaction() as db:
            person_model = db.get(PersonModel, person_id)
            if not person_model:
                raise NotFoundError("인물을 찾을 수 없습니다")

            values = form.model_dump(exclude_unset=True)
            new_ap_id = values.get("ap_id", person_model.ap_id)
            if new_ap_id != person_model.ap_id and not person_model.ap_id.startswith(
                CHANGEME_PREFIX
            ):
                raise ImmutableFieldError("연합 식별자는 바꿀 수 없습니다")

            for field, value in values.items():
                setattr(person_model, field, value)

            db.flush()
            return Person.model_validate(person_model)

    async def upsert(self, form: PersonInsertForm) -> Person:
        """
        ap_id 기준 insert 또는 덮어쓰기.

        ActivityPub 은 생성/수정을 구분하지 않으므로 받은 프로필이 항상 최신 값이다.
        단일 INSERT ... ON CONFLICT 문으로 처리한다.
        """
        values = form.model_dump(exclude_none=True)
        with self._transaction() as db:
            stmt = self._dialect_insert(db, PersonModel).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[PersonModel.ap_id], set_=values
            ).returning(PersonModel.person_id)
            person_id = db.execute(stmt).scalar_one()

            person_model = db.get(PersonModel, person_id, populate_existing=True)
            logger.info("Upserted person %s (%s)", person_id, person_model.ap_id)
            return Person.model_validate(person_model)

    async def delete_account(self, person_id: int) -> Person:
        """
        계정 삭제 (soft delete).

        로컬 사용자 이메일과 인물의 개인 정보 필드를 한 트랜잭션 안에서 비운다.
        행과 집계 카운터, 연관 콘텐츠는 그대로 남는다.
        """
        with self._transaction() as db:
            person_model = db.get(PersonModel, person_id)
            if not person_model:
                raise NotFoundError("인물을 찾을 수 없습니다")

            db.execute(
                update(LocalUserModel)
                .where(LocalUserModel.person_id == person_id)
                .values(email=None)
            )
            mark_deleted(person_model)
            db.flush()

            logger.info("Deleted account of person %s", person_id)
            return Person.model_validate(person_model)

    async def delete(self, person_id: int) -> int:
        """
        인물 완전 삭제 (관리/테스트 정리용).

        다른 인물의 집계 카운터가 되돌아가도록 인물이 남긴 좋아요, 댓글, 게시글을
        ORM 으로 먼저 지운다. 로컬 사용자와 팔로우 관계는 DB cascade 로 삭제된다.
        """
        with self._transaction() as db:
            if not db.get(PersonModel, person_id):
                return 0

            self._delete_each(db, select(PostLikeModel).where(PostLikeModel.person_id == person_id))
            self._delete_each(
                db, select(CommentLikeModel).where(CommentLikeModel.person_id == person_id)
            )
            self._delete_each(db, select(CommentModel).where(CommentModel.creator_id == person_id))
            self._delete_each(db, select(PostModel).where(PostModel.creator_id == person_id))

            result = db.execute(delete(PersonModel).where(PersonModel.person_id == person_id))
            logger.warning("Hard deleted person %s", person_id)
            return result.rowcount

    async def read_from_apub_id(self, ap_id: str) -> Optional[Person]:
        """연합 식별자로 조회 (삭제된 인물 제외)"""
        with self._transaction() as db:
            stmt = select(PersonModel).where(
                PersonModel.ap_id == ap_id, PersonModel.deleted.is_(False)
            )
            person_model = db.execute(stmt).scalar_one_or_none()
            return Person.model_validate(person_model) if person_model else None

    async def read_from_name(self, name: str, include_deleted: bool = False) -> Optional[Person]:
        """로컬 인물 이름으로 조회 (대소문자 무시)"""
        with self._transaction() as db:
            stmt = select(PersonModel).where(
                PersonModel.local.is_(True),
                func.lower(PersonModel.name) == func.lower(name),
            )
            if not include_deleted:
                stmt = stmt.where(PersonModel.deleted.is_(False))

            person_model = db.execute(stmt.limit(1)).scalars().first()
            return Person.model_validate(person_model) if person_model else None

    async def read_from_name_and_domain(self, name: str, domain: str) -> Optional[Person]:
        """name@domain 형태의 핸들 조회"""
        with self._transaction() as db:
            stmt = (
                select(PersonModel)
                .join(InstanceModel, PersonModel.instance_id == InstanceModel.instance_id)
                .where(
                    func.lower(PersonModel.name) == func.lower(name),
                    func.lower(InstanceModel.domain) == func.lower(domain),
                )
                .limit(1)
            )
            person_model = db.execute(stmt).scalars().first()
            return Person.model_validate(person_model) if person_model else None

    async def check_name_available(self, name: str) -> None:
        """로컬 인물이 이미 같은 이름(대소문자 무시)을 쓰면 UsernameAlreadyExistsError"""
        with self._transaction() as db:
            taken = db.execute(
                select(
                    exists().where(
                        func.lower(PersonModel.name) == func.lower(name),
                        PersonModel.local.is_(True),
                    )
                )
            ).scalar()

        if taken:
            raise UsernameAlreadyExistsError(f"이미 사용 중인 이름입니다: {name}")

    async def list_local_community_ids(self, creator_id: int) -> List[int]:
        """인물이 글/댓글을 쓴 로컬 커뮤니티 ID 목록 (중복 없음)"""
        with self._transaction() as db:
            comment_path = (
                select(CommunityModel.community_id)
                .select_from(CommentModel)
                .join(PostModel, CommentModel.post_id == PostModel.post_id)
                .join(CommunityModel, PostModel.community_id == CommunityModel.community_id)
                .where(CommentModel.creator_id == creator_id, _visible_local_community())
            )
            post_path = (
                select(CommunityModel.community_id)
                .select_from(PostModel)
                .join(CommunityModel, PostModel.community_id == CommunityModel.community_id)
                .where(PostModel.creator_id == creator_id, _visible_local_community())
            )
            return list(db.execute(union(comment_path, post_path)).scalars().all())

    @staticmethod
    def local_url(name: str, settings: Optional[Settings] = None) -> str:
        """로컬 인물 프로필 URL (<protocol>://<hostname>/u/<name>)"""
        settings = settings or get_settings()
        raw_url = f"{settings.get_protocol_and_hostname()}/u/{name}"

        try:
            url = _http_url.validate_python(raw_url)
        except ValidationError as e:
            raise UrlConstructionError(f"잘못된 URL 입니다: {raw_url}") from e

        if url.query or url.fragment or unquote(url.path or "") != f"/u/{name}":
            raise UrlConstructionError(f"URL 에 넣을 수 없는 이름입니다: {name}")

        return str(url)
