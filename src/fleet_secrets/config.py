from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",  # Allow extra environment variables
        populate_by_name=True,
    )

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")  # unset -> stdout
    log_max_bytes: int = Field(500 * 1024 * 1024, alias="LOG_MAX_BYTES")
    log_backup_count: int = Field(3, alias="LOG_BACKUP_COUNT")
    log_compress: bool = Field(True, alias="LOG_COMPRESS")  # gzip rotated files
    # Password hashing work factor
    bcrypt_rounds: int = Field(10, alias="BCRYPT_ROUNDS")
    # Token generation: rejection sampling instead of plain modulo mapping
    token_uniform_sampling: bool = Field(False, alias="TOKEN_UNIFORM_SAMPLING")

    @field_validator("bcrypt_rounds")
    @classmethod
    def _check_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reset_settings():
    """Clear cached settings (useful in tests when env vars change)."""
    get_settings.cache_clear()
