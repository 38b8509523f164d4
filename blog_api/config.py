# blog_api/config.py
import os
from pydantic_settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application Settings
    APP_NAME: str = "Blog Content API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 4001))

    # Database Settings (CONNECTION_STRING kept for existing deployments)
    DATABASE_URL: str = os.environ.get(
        "DATABASE_URL", os.environ.get("CONNECTION_STRING", "sqlite:///./blog.db")
    )

    # Security Settings (bearer tokens are issued by the identity provider)
    SECRET_KEY: str = Field(default="change-me-in-prod", alias="SUPABASE_JWT_SECRET")
    ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = "authenticated"
    ADMIN_ROLE: str = "admin"

    # CORS Settings (comma-separated strings)
    ALLOWED_ORIGINS: str = os.environ.get("ALLOWED_ORIGINS", "*")
    ALLOWED_METHODS: str = os.environ.get("ALLOWED_METHODS", "GET,POST,PUT,DELETE,OPTIONS")
    ALLOWED_HEADERS: str = os.environ.get("ALLOWED_HEADERS", "*")
    CORS_ALLOW_CREDENTIALS: bool = True

    # Middleware settings
    GZIP_MIN_SIZE: int = 500  # bytes

    # Post listing
    POSTS_DEFAULT_LIMIT: int = 6
    POSTS_MAX_LIMIT: int = 100

    # Notification feed
    NOTIFICATIONS_PAGE_SIZE: int = 10
    NOTIFICATIONS_WINDOW_DAYS: int = 30

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)

    @property
    def allowed_methods_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_METHODS)

    @property
    def allowed_headers_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_HEADERS)

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings: Settings = get_settings()
