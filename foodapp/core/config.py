"""
Client Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.

The backend address is picked once at startup from the host the client runs
under:
    - localhost / 127.0.0.1: the local development backend
    - anything else: the deployed backend

API_BASE_URL overrides both. The resolved value is passed into the gateway
constructor and never looked up again per request.

Usage:
    from foodapp.core.config import get_settings

    settings = get_settings()
    print(settings.api_base)

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOCAL_HOSTNAMES = ("localhost", "127.0.0.1")


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local backend, in-memory session by default
        PRODUCTION: Deployed backend
        STAGING: Pre-production testing
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class SessionBackend(str, Enum):
    """Where the session token and user snapshot are kept."""
    MEMORY = "memory"
    FILE = "file"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging

        # Backend
        client_hostname: Host the client is running under
        local_api_base: Backend used for local hosts
        deployed_api_base: Backend used for every other host
        api_base_url: Explicit override of the resolved base
        request_timeout: Seconds before a request is abandoned (unset = wait forever)

        # Session
        session_backend: memory or file
        session_file: JSON file used by the file backend
        session_lock_timeout: Seconds to wait for the session file lock
        login_page: Where logout navigates to
        admin_role: Role string that grants admin access
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Food App Client",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # ==========================================================================
    # BACKEND
    # ==========================================================================

    client_hostname: str = Field(
        default="localhost",
        description="Hostname the client is served from"
    )
    local_api_base: str = Field(
        default="http://localhost:5000/api",
        description="Backend base URL for local development hosts"
    )
    deployed_api_base: str = Field(
        default="https://food-app-945m.onrender.com/api",
        description="Backend base URL for deployed hosts"
    )
    api_base_url: Optional[str] = Field(
        default=None,
        description="Explicit backend base URL (overrides host detection)"
    )
    request_timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds; unset means no timeout"
    )

    # ==========================================================================
    # SESSION
    # ==========================================================================

    session_backend: SessionBackend = Field(
        default=SessionBackend.MEMORY,
        description="Session storage backend (memory or file)"
    )
    session_file: str = Field(
        default="data/session.json",
        description="Session file used by the file backend"
    )
    session_lock_timeout: int = Field(
        default=10,
        description="Seconds to wait for the session file lock"
    )
    login_page: str = Field(
        default="login.html",
        description="Unauthenticated entry page, target of logout"
    )
    admin_role: str = Field(
        default="admin",
        description="Role string identifying administrators"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be positive when set")
        return v

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_local_host(self) -> bool:
        """Check if the client runs under a local development host."""
        return self.client_hostname in LOCAL_HOSTNAMES

    @property
    def api_base(self) -> str:
        """Backend base URL for this process."""
        if self.api_base_url:
            return self.api_base_url
        return resolve_api_base(
            self.client_hostname,
            local_base=self.local_api_base,
            deployed_base=self.deployed_api_base,
        )


def resolve_api_base(
    hostname: str,
    local_base: str = "http://localhost:5000/api",
    deployed_base: str = "https://food-app-945m.onrender.com/api",
) -> str:
    """
    Pick the backend base URL for a hostname.

    Args:
        hostname: Host the client is running under
        local_base: Base used for localhost / 127.0.0.1
        deployed_base: Base used for every other host

    Returns:
        str: Backend base URL (no trailing slash)
    """
    if hostname in LOCAL_HOSTNAMES:
        return local_base
    return deployed_base


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached client settings.

    Settings are loaded once per process, so the backend address
    stays fixed for the process lifetime.

    Returns:
        Settings: Configured client settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.api_base)
        http://localhost:5000/api
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("filelock").setLevel(logging.WARNING)

    return logging.getLogger("foodapp")

