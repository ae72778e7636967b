"""Synchronous API client that sends requests and deserializes responses."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from .api import PetApi, StoreApi, UserApi
from .config import ClientConfig
from .descriptors import TypeDescriptor
from .errors import ClientTimeoutError, TransportError
from .models import build_default_registry
from .registry import ModelRegistry
from .response import Response


def encode_query(params: dict[str, Any] | None) -> str:
    if not params:
        return ""

    encoded: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if isinstance(item, bool):
                encoded.append((key, "true" if item else "false"))
                continue
            encoded.append((key, str(item)))

    if not encoded:
        return ""
    return "?" + urlencode(encoded)


class ApiClient:
    """Sends requests through ``httpx`` and turns responses into values.

    Non-2xx responses surface as :class:`~swagger_client.errors.ApiError`
    subclasses; network failures as :class:`~swagger_client.errors.TransportError`.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
        registry: ModelRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.registry = registry if registry is not None else build_default_registry()
        self._logger = logger or logging.getLogger(__name__)
        self._api_prefix = self.config.api_prefix.rstrip("/")
        self._client = http_client or httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            headers=self.config.headers,
        )

        self.pet = PetApi(self.call_api)
        self.store = StoreApi(self.call_api)
        self.user = UserApi(self.call_api)

    @classmethod
    def from_env(cls) -> "ApiClient":
        return cls(ClientConfig.from_env())

    def call_api(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        return_type: str | TypeDescriptor | None = None,
        query: dict[str, Any] | None = None,
        json_body: Any | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = self._api_prefix + path
        if query:
            url += encode_query(query)

        self._logger.debug("%s %s %s", operation, method, url)
        try:
            raw = self._client.request(
                method,
                url,
                json=json_body,
                files=files,
                data=data,
                headers=headers,
            )
        except httpx.TimeoutException as error:
            raise ClientTimeoutError(str(error)) from error
        except httpx.HTTPError as error:
            raise TransportError(str(error)) from error

        response = self.wrap(raw)
        if return_type is None:
            return None
        return response.deserialize(return_type)

    def wrap(self, raw: httpx.Response) -> Response:
        return Response(raw, registry=self.registry, config=self.config, logger=self._logger)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
