"""
House Hunters 설정 관리

모든 설정값은 .env 파일에서 관리합니다.
사용법:
    from househunters.config import settings
    name = settings.EXPORT_BASE_FILENAME
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # .env에 정의되지 않은 변수 무시
    )

    # === 환경 ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === 내보내기 ===
    EXPORT_BASE_FILENAME: str = "house-hunters-data"
    EXPORT_DIR: str = "exports"

    # === 평점 (항목별 1~5점) ===
    MAX_RATING: int = 5
    DEFAULT_RATING: int = 3

    # === 가중치 (슬라이더 범위) ===
    DEFAULT_WEIGHT: float = 1.0
    MIN_WEIGHT: float = 0.0
    MAX_WEIGHT: float = 3.0
    WEIGHT_STEP: float = 0.1


# 싱글톤 인스턴스
settings = Settings()
