"""
Settings for neo-auth-adapters.

Pydantic settings read from the environment (or a .env file) so services can
tune logging and strategy behaviour without code changes.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging and access log settings (LOG_* environment variables)."""
    
    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    level: Optional[str] = Field(default=None, description="Explicit root log level")
    verbosity: str = Field(default="NORMAL", description="QUIET, NORMAL, VERBOSE or DEBUG")
    format: str = Field(default="simple", description="simple or detailed")
    
    # Access log
    enable_access_log: bool = Field(default=True)
    access_log_format: str = Field(default="combined")
    access_log_exempt_paths: List[str] = Field(default_factory=lambda: ["/health", "/metrics"])
    
    @field_validator('access_log_format')
    @classmethod
    def validate_access_log_format(cls, v):
        """Validate the access log format name."""
        # Imported here, the middleware module itself imports from config
        from ..infrastructure.middleware.access_log_middleware import ACCESS_LOG_FORMATS
        
        v = v.strip().lower()
        if v not in ACCESS_LOG_FORMATS:
            raise ValueError(
                f"Invalid access log format '{v}', expected one of {sorted(ACCESS_LOG_FORMATS)}"
            )
        return v


class AuthAdapterSettings(BaseSettings):
    """Strategy adapter settings (AUTH_* environment variables)."""
    
    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    session_user_key: str = Field(default="auth_user")
    strategy_timeout: Optional[float] = Field(default=None, gt=0)
    normalize_strategy_exceptions: bool = Field(default=True)


@lru_cache()
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()


@lru_cache()
def get_auth_settings() -> AuthAdapterSettings:
    """Get cached strategy adapter settings."""
    return AuthAdapterSettings()
