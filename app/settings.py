from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # CMS (Strapi)
    CMS_URL: str = "http://localhost:1337"

    # Blog
    BLOG_PAGE_SIZE: int = 9
    HOME_LATEST_POSTS: int = 3
    EXCERPT_LENGTH: int = 150

    # Site
    SITE_NAME: str = "MOSC"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def cms_base_url(self) -> str:
        return self.CMS_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
