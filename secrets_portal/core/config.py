# File: secrets_portal/core/config.py

import os
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator, model_validator  # BaseSettings not needed

# Credentials live in .env next to the app, never in code
load_dotenv()


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Secrets Portal"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database connection (supplied externally)
    pg_username: str = os.getenv("PG_USERNAME", "postgres")
    pg_password: str = os.getenv("PG_PASSWORD", "")
    pg_host: str = os.getenv("PG_HOST", "localhost")
    pg_port: int = int(os.getenv("PG_PORT", "5432"))
    pg_database: str = os.getenv("PG_DATABASE", "authentication-practice")

    # Full URL wins over the PG_* parts when given (tests use sqlite)
    database_url: Optional[str] = os.getenv("DATABASE_URL") or None

    # Password hashing
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = (
                f"postgresql+psycopg://{quote_plus(self.pg_username)}:"
                f"{quote_plus(self.pg_password)}@{self.pg_host}:{self.pg_port}/"
                f"{self.pg_database}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
