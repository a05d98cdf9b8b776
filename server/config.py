# server/config.py

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide configuration, read from the environment (and .env) once.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
    )

    app_env: str = "development"
    secret_key: str = Field(default="change-me", validation_alias="JWT_SECRET_KEY")
    algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10
    database_url: str = "sqlite:///./data/app.db"
    test_database_url: str = "sqlite://"
    log_level: str = "INFO"

    @property
    def effective_database_url(self) -> str:
        if self.app_env == "test":
            return self.test_database_url
        return self.database_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
