"""Generated Python client for the Swagger Petstore API.

This module uses lazy exports so lightweight pieces (for example descriptor
parsing or config loading) can be imported without importing ``httpx``.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "AuthError",
    "Category",
    "ClientConfig",
    "ClientTimeoutError",
    "ConflictError",
    "DescriptorError",
    "DeserializationError",
    "GoneError",
    "InvalidDateTimeError",
    "LockedError",
    "ModelRegistry",
    "ModelValidationError",
    "NotFoundError",
    "Order",
    "Pet",
    "Response",
    "ResponseParseError",
    "ServerError",
    "SwaggerClientError",
    "SwaggerModel",
    "Tag",
    "TransportError",
    "UnknownModelTypeError",
    "UnsupportedContentTypeError",
    "User",
    "ValidationError",
    "build_default_registry",
    "parse_descriptor",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "ApiClient": (".client", "ApiClient"),
    "ClientConfig": (".config", "ClientConfig"),
    "parse_descriptor": (".descriptors", "parse_descriptor"),
    "ApiError": (".errors", "ApiError"),
    "AuthError": (".errors", "AuthError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "ConflictError": (".errors", "ConflictError"),
    "DescriptorError": (".errors", "DescriptorError"),
    "DeserializationError": (".errors", "DeserializationError"),
    "GoneError": (".errors", "GoneError"),
    "InvalidDateTimeError": (".errors", "InvalidDateTimeError"),
    "LockedError": (".errors", "LockedError"),
    "ModelValidationError": (".errors", "ModelValidationError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "ResponseParseError": (".errors", "ResponseParseError"),
    "ServerError": (".errors", "ServerError"),
    "SwaggerClientError": (".errors", "SwaggerClientError"),
    "TransportError": (".errors", "TransportError"),
    "UnknownModelTypeError": (".errors", "UnknownModelTypeError"),
    "UnsupportedContentTypeError": (".errors", "UnsupportedContentTypeError"),
    "ValidationError": (".errors", "ValidationError"),
    "ApiResponse": (".models", "ApiResponse"),
    "Category": (".models", "Category"),
    "Order": (".models", "Order"),
    "Pet": (".models", "Pet"),
    "SwaggerModel": (".models", "SwaggerModel"),
    "Tag": (".models", "Tag"),
    "User": (".models", "User"),
    "build_default_registry": (".models", "build_default_registry"),
    "ModelRegistry": (".registry", "ModelRegistry"),
    "Response": (".response", "Response"),
}

if TYPE_CHECKING:
    from .client import ApiClient
    from .config import ClientConfig
    from .descriptors import parse_descriptor
    from .errors import (
        ApiError,
        AuthError,
        ClientTimeoutError,
        ConflictError,
        DescriptorError,
        DeserializationError,
        GoneError,
        InvalidDateTimeError,
        LockedError,
        ModelValidationError,
        NotFoundError,
        ResponseParseError,
        ServerError,
        SwaggerClientError,
        TransportError,
        UnknownModelTypeError,
        UnsupportedContentTypeError,
        ValidationError,
    )
    from .models import ApiResponse, Category, Order, Pet, SwaggerModel, Tag, User, build_default_registry
    from .registry import ModelRegistry
    from .response import Response


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
