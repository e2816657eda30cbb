# app/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import get_settings

settings = get_settings()


def build_engine(database_url: str, **kwargs) -> Engine:
    """엔진 생성 (SQLite면 외래키 제약 활성화)"""
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # 연결 상태 확인
        kwargs.setdefault("pool_recycle", settings.db_pool_recycle)

    new_engine = create_engine(database_url, echo=settings.debug, **kwargs)

    if new_engine.dialect.name == "sqlite":
        # ON DELETE CASCADE 가 동작하려면 커넥션마다 켜야 함
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# 엔진 생성
engine = build_engine(settings.database_url)

# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base 클래스 생성
Base = declarative_base()
