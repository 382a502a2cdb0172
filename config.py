"""
Service configuration
Reads environment variables once at startup.
"""

import os
import secrets
from dataclasses import dataclass


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing"""


@dataclass(frozen=True)
class Settings:
    onboard_url: str
    secret_key: str
    log_level: str = 'INFO'
    port: int = 8080


def _env(name: str, default: str = None) -> str:
    value = os.getenv(name)
    return value if value not in (None, '') else default


def load_settings() -> Settings:
    """
    Build settings from the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: if ONBOARD_URL is not set
    """
    onboard_url = _env('ONBOARD_URL')
    if not onboard_url:
        raise ConfigurationError("ONBOARD_URL not configured")

    return Settings(
        onboard_url=onboard_url,
        secret_key=_env('FLASK_SECRET_KEY', secrets.token_hex(32)),
        log_level=_env('LOG_LEVEL', 'INFO').upper(),
        port=int(_env('PORT', '8080')),
    )
