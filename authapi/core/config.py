# File: authapi/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "User Auth API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # CORS
    backend_cors_origins: List[str] = os.getenv("CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./authapi.db")

    # Tokens
    secret_key: str = os.getenv("JWT_SECRET", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

    # Password hashing cost (bcrypt log2 rounds)
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # env values arrive as raw strings, so run validators on defaults too
    model_config = {"validate_default": True}

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
