from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

DEFAULT_BASE_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT = 30.0

ENV_TOKEN = "BOTCRAFT_TOKEN"
ENV_BASE_URL = "BOTCRAFT_BASE_URL"
ENV_TIMEOUT = "BOTCRAFT_TIMEOUT"
ENV_PROXY = "BOTCRAFT_PROXY"


class ConfigError(Exception):
    pass


@dataclass(slots=True, frozen=True)
class ApiConfig:
    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    proxy: str | None = None

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigError("Bot token is required")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ApiConfig:
        """Read BOTCRAFT_TOKEN, BOTCRAFT_BASE_URL, BOTCRAFT_TIMEOUT and BOTCRAFT_PROXY."""
        source = os.environ if env is None else env
        return cls(
            token=_as_str(source.get(ENV_TOKEN)) or "",
            base_url=(_as_str(source.get(ENV_BASE_URL)) or DEFAULT_BASE_URL).rstrip("/"),
            timeout=_as_float(source.get(ENV_TIMEOUT), default=DEFAULT_TIMEOUT, min_value=0.0),
            proxy=_as_str(source.get(ENV_PROXY)),
        )


def _as_str(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    normalized = value.strip()
    return normalized or None


def _as_float(value: Any, *, default: float, min_value: float | None = None) -> float:
    if value is None or isinstance(value, bool):
        out = default
    elif isinstance(value, (int, float)):
        out = float(value)
    elif isinstance(value, str):
        try:
            out = float(value.strip())
        except ValueError:
            out = default
    else:
        out = default
    if min_value is not None and out < min_value:
        return min_value
    return out


def load_api_config(path: str | Path) -> ApiConfig:
    """
    Load API settings from a JSON object file.

    Unknown keys are ignored; malformed optional values fall back to defaults.
    """
    p = Path(path).expanduser()
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config {p}: {e}") from e
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid JSON in config {p}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"Invalid config at {p}: root must be an object")
    data = cast(dict[str, Any], payload)

    base_url = _as_str(data.get("base_url")) or DEFAULT_BASE_URL
    return ApiConfig(
        token=_as_str(data.get("token")) or "",
        base_url=base_url.rstrip("/"),
        timeout=_as_float(data.get("timeout"), default=DEFAULT_TIMEOUT, min_value=0.0),
        proxy=_as_str(data.get("proxy")),
    )
