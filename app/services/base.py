# app/services/base.py

import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import Select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from app.core.exceptions import ConnectivityError, NotFoundError, UniqueViolationError
from app.database import SessionLocal

logger = logging.getLogger(__name__)


def _violates(error: IntegrityError, sqlstate: str, marker: str) -> bool:
    # psycopg2: pgcode, psycopg 3: sqlstate / sqlite: "UNIQUE constraint failed" 등
    for attr in ("pgcode", "sqlstate"):
        if getattr(error.orig, attr, None) == sqlstate:
            return True
    return marker in str(error.orig).lower()


def _is_unique_violation(error: IntegrityError) -> bool:
    return _violates(error, "23505", "unique")


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    return _violates(error, "23503", "foreign key")


class BaseService:
    """세션 하나 = 트랜잭션 하나"""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._session_factory = session_factory or SessionLocal

    def _get_db(self) -> Session:
        """데이터베이스 세션 생성"""
        return self._session_factory()

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        """블록이 끝나면 커밋, 실패하면 전체 롤백"""
        db = self._get_db()
        try:
            yield db
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if _is_unique_violation(e):
                logger.warning("Unique constraint violated: %s", e.orig)
                raise UniqueViolationError(str(e.orig)) from e
            if _is_foreign_key_violation(e):
                logger.warning("Referenced row missing: %s", e.orig)
                raise NotFoundError("참조하는 대상을 찾을 수 없습니다") from e
            raise
        except (OperationalError, InterfaceError) as e:
            db.rollback()
            logger.error("Database unreachable: %s", e.orig)
            raise ConnectivityError("데이터베이스에 연결할 수 없습니다") from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    @staticmethod
    def _delete_each(db: Session, stmt: Select) -> None:
        """조회된 행을 하나씩 ORM 으로 삭제 (집계 이벤트 발생)"""
        for row in db.execute(stmt).scalars().all():
            db.delete(row)
        db.flush()

    @staticmethod
    def _dialect_insert(db: Session, model):
        """ON CONFLICT DO UPDATE 를 지원하는 방언별 insert"""
        dialect = db.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql_insert(model)
        if dialect == "sqlite":
            return sqlite_insert(model)
        raise ValueError(f"upsert 미지원 데이터베이스: {dialect}")
