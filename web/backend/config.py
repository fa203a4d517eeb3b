#!/usr/bin/env python3
"""
Configuration management for the PlacementIQ web application.
"""

import os
import yaml
from pathlib import Path
from functools import lru_cache
from typing import Dict, Any, Literal
from pydantic import BaseModel, Field

from core.readiness import InvalidMockTestPolicy


class DatabaseConfig(BaseModel):
    """Database configuration."""
    url: str = Field(default="sqlite:///placement_iq.db")


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)


DEFAULT_JWT_SECRET = "placement-iq-secret-key"


class AuthConfig(BaseModel):
    """Session token and cookie configuration."""
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    token_ttl_hours: int = Field(default=24 * 7, ge=1)
    cookie_name: str = Field(default="token")
    cookie_secure: bool = Field(default=True)
    cookie_samesite: Literal["lax", "strict", "none"] = Field(default="none")
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    login_rate_limit: str = Field(default="10/minute")


class ReadinessConfig(BaseModel):
    """Readiness scoring configuration."""
    invalid_mock_test_policy: InvalidMockTestPolicy = Field(default=InvalidMockTestPolicy.ZERO)


class AppConfig(BaseModel):
    """Main application configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    readiness: ReadinessConfig = Field(default_factory=ReadinessConfig)


def _load_yaml_config() -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = Path(os.environ.get('PLACEMENTIQ_CONFIG', get_project_root() / 'config.yaml'))

    if config_path.exists():
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    return {}


def _set(config_dict: Dict[str, Any], section: str, key: str, value: Any) -> None:
    config_dict.setdefault(section, {})[key] = value


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    # Database overrides
    if 'DATABASE_URL' in os.environ:
        _set(config_dict, 'database', 'url', os.environ['DATABASE_URL'])

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        _set(config_dict, 'web', 'host', os.environ['WEB_HOST'])

    if 'WEB_PORT' in os.environ:
        _set(config_dict, 'web', 'port', int(os.environ['WEB_PORT']))

    # Auth overrides
    if 'JWT_SECRET' in os.environ:
        _set(config_dict, 'auth', 'jwt_secret', os.environ['JWT_SECRET'])

    if 'AUTH_COOKIE_SECURE' in os.environ:
        secure = os.environ['AUTH_COOKIE_SECURE'].strip().lower() in ('1', 'true', 'yes', 'on')
        _set(config_dict, 'auth', 'cookie_secure', secure)

    # Readiness overrides
    if 'READINESS_INVALID_MOCK_TEST_POLICY' in os.environ:
        _set(
            config_dict, 'readiness', 'invalid_mock_test_policy',
            os.environ['READINESS_INVALID_MOCK_TEST_POLICY'].strip().lower()
        )

    return config_dict


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file and applies environment variable overrides.
    Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    raw_config = _load_yaml_config()
    raw_config = _apply_env_overrides(raw_config)

    return AppConfig(**raw_config)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
