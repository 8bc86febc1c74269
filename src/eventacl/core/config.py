"""Application configuration loaded from environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DBConfig(BaseSettings):
    """Database configuration. No URL means in-memory stores."""

    model_config = {"env_prefix": "EVENTACL_DB_"}

    database_url: str | None = None
    echo: bool = False
    pool_size: int = 5


class ACLConfig(BaseSettings):
    """Relationship ACL configuration."""

    model_config = {"env_prefix": "EVENTACL_ACL_"}

    owner_config_key: str = "event_owner_attribute"
    include_self: bool = False
    fixtures_path: str | None = None


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "EVENTACL_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    db: DBConfig = Field(default_factory=DBConfig)
    acl: ACLConfig = Field(default_factory=ACLConfig)
