from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from swagger_client.config import DEFAULT_API_PREFIX, DEFAULT_BASE_URL, ClientConfig


def test_from_file_loads_json_shape(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "baseUrl": "http://petstore.test",
                "apiPrefix": "v3",
                "timeoutMs": 45000,
                "headers": {"x-test": "ok", "x-empty": " "},
                "tempFolderPath": str(tmp_path / "downloads"),
            }
        ),
        encoding="utf-8",
    )

    cfg = ClientConfig.from_file(config_path)
    assert cfg.base_url == "http://petstore.test"
    assert cfg.api_prefix == "/v3"
    assert cfg.timeout_seconds == 45.0
    assert cfg.headers == {"x-test": "ok"}
    assert cfg.resolve_temp_folder() == tmp_path / "downloads"


def test_from_file_missing_or_broken_uses_defaults(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    for path in (tmp_path / "missing.json", broken):
        cfg = ClientConfig.from_file(path)
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.api_prefix == DEFAULT_API_PREFIX
        assert cfg.temp_folder_path is None


def test_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SWAGGER_CLIENT_BASE_URL", "http://env.test")
    monkeypatch.setenv("SWAGGER_CLIENT_API_PREFIX", "/api")
    monkeypatch.setenv("SWAGGER_CLIENT_TIMEOUT_MS", "1500")
    monkeypatch.setenv("SWAGGER_CLIENT_TEMP_FOLDER", str(tmp_path))

    cfg = ClientConfig.from_env()
    assert cfg.base_url == "http://env.test"
    assert cfg.api_prefix == "/api"
    assert cfg.timeout_seconds == 1.5
    assert cfg.temp_folder_path == str(tmp_path)


def test_temp_folder_defaults_to_system_temp_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SWAGGER_CLIENT_TEMP_FOLDER", raising=False)
    monkeypatch.setenv("SWAGGER_CLIENT_TIMEOUT_MS", "-5")

    cfg = ClientConfig.from_env()
    assert cfg.resolve_temp_folder() == Path(tempfile.gettempdir())
    assert cfg.timeout_seconds == 30.0
