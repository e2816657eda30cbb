# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import get_settings
from app.core.exceptions import ApplicationError
from app.core.logging import setup_logging
from app.api.v1 import api_router
from app.database import engine, Base
from app import models  # noqa: F401  모델/집계 이벤트 등록

# 설정 로드
settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시
    setup_logging()
    # 데이터베이스 테이블 생성
    Base.metadata.create_all(bind=engine)
    logger.info("%s started", settings.app_name)

    yield

    # 종료 시
    engine.dispose()
    logger.info("%s stopped", settings.app_name)


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="Federated person & follow store",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


# CORS 미들웨어
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API v1 라우터 등록
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    """서비스 루트"""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }
