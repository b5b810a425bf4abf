from __future__ import annotations

import os
from urllib.parse import urlparse

from .models import DEFAULT_BASE_URL, Config


def _read_positive_int(env_name: str, default: int) -> int:
    raw = os.getenv(env_name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_config() -> Config:
    return Config(
        api_key=os.getenv("PASTERY_API_KEY") or None,
        base_url=os.getenv("PASTERY_BASE_URL", DEFAULT_BASE_URL),
        timeout_sec=_read_positive_int("PASTERY_TIMEOUT_SEC", 30),
    )


def validate_runtime(config: Config) -> list[str]:
    errors: list[str] = []
    if not config.api_key:
        errors.append("PASTERY_API_KEY is not set; find your key at https://www.pastery.net/account/")
    parsed = urlparse(config.base_url)
    if parsed.scheme != "https" or not parsed.netloc:
        errors.append(f"PASTERY_BASE_URL must be an https URL: {config.base_url}")
    return errors
