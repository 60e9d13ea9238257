"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./hotel_admin.db"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # 관리 대상 호텔. 미설정 시 유일한 호텔 행을 사용합니다.
    HOTEL_ID: Optional[int] = None

    # 이미지 업로드
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]
    IMAGE_CONTAINERS: List[str] = ["hotel-images", "room-images", "gallery-images"]
    DEFAULT_MAX_IMAGES: int = 10
    UPLOAD_DIR: str = "uploads"
    PUBLIC_BASE_URL: str = ""

    # 오브젝트 스토리지 백엔드: local | supabase
    STORAGE_BACKEND: str = "local"
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_KEY: str = ""
    STORAGE_TIMEOUT_SECONDS: float = 30.0

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
