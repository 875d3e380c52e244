# inventory_app/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from functools import lru_cache
from typing import List

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "info"

    DATA_DIR: Path = Path("data")  # where the JSON document lives
    DATA_FILE: str = "database.json"
    LOCK_TIMEOUT_SECONDS: float = 10.0

    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_MAX_AGE_MINUTES: int = 60 * 24
    COOKIE_SECURE: bool = False  # set True behind https

    # seeded on first run when the user table is empty; change for prod
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    CORS_ORIGINS: str = ""
    STATIC_DIR: Path = Path("static")

    # Example .env:
    # PORT=8080
    # DATA_DIR=./var
    # DEFAULT_ADMIN_PASSWORD=something-long

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def data_file_path(self) -> Path:
        return Path(self.DATA_DIR) / self.DATA_FILE

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or [f"http://localhost:{self.PORT}"]


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
