# app/api/v1/system.py

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, InterfaceError
from app.core.config import get_settings
from app.core.exceptions import ConnectivityError
from app.database import engine

router = APIRouter()


def get_engine() -> Engine:
    return engine


@router.get("/health")
def health_check():
    """서비스 헬스체크"""
    return {"status": "healthy", "service": get_settings().app_name}


@router.get("/db-check")
def check_db(db_engine: Engine = Depends(get_engine)):
    """데이터베이스 연결 확인"""
    try:
        with db_engine.connect() as connection:
            result = connection.execute(text("SELECT 1"))
            return {"status": "ok", "result": result.scalar()}
    except (OperationalError, InterfaceError) as e:
        raise ConnectivityError("데이터베이스에 연결할 수 없습니다") from e
