from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMPUTE_", env_file=".env", extra="ignore"
    )

    compute_url: str = Field(default="http://localhost:8774/v1.1")
    tenant_id: str = Field(default="")
    # pre-issued token; obtaining one is left to the caller
    auth_token: str | None = Field(default=None)
    timeout_sec: float = Field(default=10.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
