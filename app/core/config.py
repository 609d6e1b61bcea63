from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _resolve_path(value: str, fallback: str) -> str:
    raw = (value or "").strip() or fallback
    path = Path(raw)
    if not path.is_absolute():
        path = (PROJECT_ROOT / path).resolve()
    return str(path)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = ""
    POSTGRES_USER: str = ""
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = ""
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_CREATE_TABLES: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Docs
    API_TITLE: str = "Adapi"
    API_VERSION: str = "1.0.0"
    DOCS_URL: str = "/api-docs"

    # Static files
    STATIC_DIR: str = "public"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE_PATH: str = ""
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    @model_validator(mode="after")
    def normalize(self) -> "AppSettings":
        self.DATABASE_URL = (self.DATABASE_URL or "").strip() or self._postgres_url() or "sqlite:///adapi.db"
        self.LOG_LEVEL = (self.LOG_LEVEL or "INFO").upper()
        self.LOG_DIR = _resolve_path(self.LOG_DIR, "logs")
        self.LOG_FILE_PATH = _resolve_path(self.LOG_FILE_PATH, str(Path(self.LOG_DIR) / "app.log"))
        self.STATIC_DIR = _resolve_path(self.STATIC_DIR, "public")
        return self

    def _postgres_url(self) -> str:
        if not self.POSTGRES_DB:
            return ""
        url = URL.create(
            "postgresql+psycopg2",
            username=self.POSTGRES_USER or None,
            password=self.POSTGRES_PASSWORD or None,
            host=self.POSTGRES_HOST or "localhost",
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DB,
        )
        return url.render_as_string(hide_password=False)


settings = AppSettings()
