from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from .client import DEFAULT_API_URL, LinearClient

# First one present wins.
TOKEN_ENV_VARS: Tuple[str, ...] = ("LINEAR_REFRESH_TOKEN", "LINEAR_ACCESS_TOKEN")
DEFAULT_TIMEOUT_SECONDS = 10.0


class MissingTokenError(ValueError):
    """Raised when no Linear access credential is configured."""


@dataclass(frozen=True)
class LinearConfig:
    access_token: str
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _token_from_env() -> Optional[str]:
    for name in TOKEN_ENV_VARS:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return None


def load_env_config(*, use_dotenv: bool = True) -> LinearConfig:
    """Load the Linear credential and server settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    token = _token_from_env()
    if not token:
        raise MissingTokenError(
            f"Missing {' or '.join(TOKEN_ENV_VARS)} in environment."
        )
    return LinearConfig(
        access_token=token,
        api_url=os.getenv("LINEAR_API_URL", "").strip() or DEFAULT_API_URL,
        timeout_seconds=_get_float_env(
            "LINEAR_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS
        ),
        log_level=os.getenv("LOG_LEVEL", "").strip() or "INFO",
    )


def create_client_from_env(
    config: Optional[LinearConfig] = None, **kwargs
) -> LinearClient:
    """Create a LinearClient from environment variables."""
    config = config or load_env_config()
    return LinearClient(
        access_token=config.access_token,
        api_url=config.api_url,
        timeout_seconds=config.timeout_seconds,
        **kwargs,
    )


__all__ = [
    "LinearConfig",
    "MissingTokenError",
    "TOKEN_ENV_VARS",
    "load_env_config",
    "create_client_from_env",
]
