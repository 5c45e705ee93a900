from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGED_PUBLIC_DIR = Path(__file__).resolve().parents[3] / "frontend" / "public"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    FILE_STORAGE_DIR: Path = Path('uploads')
    PUBLIC_DIR: Path = PACKAGED_PUBLIC_DIR
    HOST: str = '0.0.0.0'
    PORT: int = 3000
    MAX_UPLOAD_BYTES: int = 500 * 1024 * 1024
    UPLOAD_FIELD_NAME: str = 'myFile'
    DOWNLOAD_CHUNK_SIZE: int = 64 * 1024
    LOG_LEVEL: str = 'INFO'


@lru_cache
def get_settings() -> Settings:
    return Settings()
