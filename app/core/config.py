# app/core/config.py

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="Fedi Person Store", description="애플리케이션 이름")
    debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173"], description="CORS 허용 origin 목록"
    )

    # 데이터베이스 설정
    database_url: str = Field(
        default="sqlite:///./person_store.db", description="데이터베이스 연결 URL"
    )
    db_pool_recycle: int = Field(default=300, description="커넥션 재사용 주기(초)")

    # 연합(federation) 설정
    hostname: str = Field(default="localhost:8536", description="로컬 인스턴스 호스트명")
    tls_enabled: bool = Field(default=True, description="https 사용 여부")

    def get_protocol_and_hostname(self) -> str:
        """프로토콜 + 호스트명 (예: https://example.com)"""
        protocol = "https" if self.tls_enabled else "http"
        return f"{protocol}://{self.hostname}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
