"""Application configuration from environment."""
from pathlib import Path
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Registration Form"
    debug: bool = False
    log_level: str = "INFO"

    port: int = 3000

    # Database; may contain {username} / {password} placeholders
    database_url: str = "sqlite+aiosqlite:///./registration_form.db"
    db_username: str | None = None
    db_password: str | None = None

    # Uploaded profile pictures
    upload_dir: str = "uploads"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def has_store_credentials(self) -> bool:
        return bool(self.db_username) and bool(self.db_password)

    @property
    def store_url(self) -> str:
        """database_url with credentials filled in."""
        return self.database_url.format(
            username=quote_plus(self.db_username or ""),
            password=quote_plus(self.db_password or ""),
        )


def get_settings() -> Settings:
    return Settings()


# Package dir holding templates/ and static/
APP_DIR = Path(__file__).resolve().parent.parent
