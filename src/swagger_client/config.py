"""Configuration helpers for swagger-client."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_BASE_URL = "http://petstore.swagger.io"
DEFAULT_API_PREFIX = "/v2"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    api_prefix: str = DEFAULT_API_PREFIX
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    headers: dict[str, str] = field(default_factory=dict)
    # Where downloaded files are written; None means the system temp dir.
    temp_folder_path: str | None = None

    def resolve_temp_folder(self) -> Path:
        if self.temp_folder_path:
            return Path(self.temp_folder_path)
        return Path(tempfile.gettempdir())

    @classmethod
    def from_env(cls) -> "ClientConfig":
        base_url = _trim_or_default(os.getenv("SWAGGER_CLIENT_BASE_URL"), DEFAULT_BASE_URL)
        api_prefix = normalize_prefix(os.getenv("SWAGGER_CLIENT_API_PREFIX", DEFAULT_API_PREFIX))
        timeout_ms = _parse_positive_int(os.getenv("SWAGGER_CLIENT_TIMEOUT_MS"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS
        temp_folder_path = _trim_or_none(os.getenv("SWAGGER_CLIENT_TEMP_FOLDER"))

        return cls(
            base_url=base_url,
            api_prefix=api_prefix,
            timeout_seconds=timeout_seconds,
            temp_folder_path=temp_folder_path,
        )

    @classmethod
    def from_file(cls, config_path: str | Path) -> "ClientConfig":
        payload = load_config_file(config_path)

        base_url = _trim_or_default(payload.get("baseUrl"), DEFAULT_BASE_URL)
        api_prefix = normalize_prefix(_trim_or_default(payload.get("apiPrefix"), DEFAULT_API_PREFIX))
        timeout_ms = _parse_positive_int(payload.get("timeoutMs"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        headers: dict[str, str] = {}
        raw_headers = payload.get("headers")
        if isinstance(raw_headers, dict):
            for key, value in raw_headers.items():
                if isinstance(key, str) and isinstance(value, str) and key.strip() and value.strip():
                    headers[key] = value

        return cls(
            base_url=base_url,
            api_prefix=api_prefix,
            timeout_seconds=timeout_seconds,
            headers=headers,
            temp_folder_path=_trim_or_none(payload.get("tempFolderPath")),
        )


def normalize_prefix(value: str | None) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        return DEFAULT_API_PREFIX
    return trimmed if trimmed.startswith("/") else f"/{trimmed}"


def load_config_file(config_path: str | Path) -> dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}

    if not isinstance(parsed, dict):
        return {}
    return parsed


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _trim_or_default(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    return trimmed if trimmed else fallback


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
