"""Response wrapper and deserializer for generated API calls."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig
from .descriptors import (
    ArrayOf,
    DateTimeType,
    FileType,
    MapOf,
    ModelRef,
    ObjectType,
    Primitive,
    TypeDescriptor,
    as_descriptor,
)
from .errors import (
    DeserializationError,
    InvalidDateTimeError,
    ResponseParseError,
    UnsupportedContentTypeError,
    classify_api_error,
)
from .protocols import RawResponse
from .registry import ModelRegistry

DEFAULT_CONTENT_TYPE = "application/json"
LINE_BREAK_MARKER = "<br/>"

_FILENAME_PATTERN = re.compile(r"""filename=['"]?([^'"\s;]+)['"]?""")
_ISO_8601_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:[Tt ]\d{2}:\d{2}(?::\d{2}(?:[.,]\d+)?)?(?:[Zz]|[+-]\d{2}(?::?\d{2})?)?)?"
)
_datetime_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)


def _flatten_headers(raw: RawResponse) -> dict[str, str]:
    # httpx.Headers.items() already joins repeated headers with ", ".
    return {str(key): str(value) for key, value in raw.headers.items()}


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def _pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False).replace("\n", LINE_BREAK_MARKER)


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class Response:
    """A successful HTTP response that knows how to deserialize its body.

    Wrapping a response with a non-2xx status raises the matching
    :class:`~swagger_client.errors.ApiError` right away, so callers never get
    to deserialize a failed response.

    ``registry`` resolves model names used in return type descriptors and
    ``config`` supplies the folder that ``File`` responses are written to.
    """

    def __init__(
        self,
        raw: RawResponse,
        *,
        registry: ModelRegistry | None = None,
        config: ClientConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.raw = raw
        self._registry = registry if registry is not None else ModelRegistry()
        self._config = config or ClientConfig()
        self._logger = logger or logging.getLogger(__name__)

        if not _is_success(raw.status_code):
            raise classify_api_error(
                raw.status_code,
                raw.reason_phrase,
                response_headers=_flatten_headers(raw),
                response_body=raw.text,
            )

    @property
    def code(self) -> int:
        return self.raw.status_code

    @property
    def status_message(self) -> str:
        return self.raw.reason_phrase

    @property
    def body(self) -> str:
        return self.raw.text

    @property
    def headers(self) -> dict[str, str]:
        return _flatten_headers(self.raw)

    @property
    def content_type(self) -> str | None:
        return self.raw.headers.get("Content-Type")

    @property
    def format(self) -> str | None:
        """Subtype of the response media type, e.g. ``"json"`` or ``"xml"``."""
        if not self.content_type:
            return None
        return _media_type(self.content_type).split("/")[-1]

    @property
    def is_json(self) -> bool:
        return self.format == "json"

    @property
    def is_xml(self) -> bool:
        return self.format == "xml"

    @property
    def pretty_body(self) -> str | None:
        if not self.body.strip() or not self.is_json:
            return None
        return _pretty_json(json.loads(self.body))

    @property
    def pretty_headers(self) -> str:
        return _pretty_json(self.headers)

    def deserialize(self, return_type: str | TypeDescriptor) -> Any:
        """Deserialize the body into the shape named by ``return_type``.

        ``return_type`` is a descriptor such as ``"Pet"``, ``"Array<Pet>"`` or
        ``"Hash<String, Integer>"``. Blank bodies deserialize to ``None``.
        """
        if not self.raw.content.strip():
            return None

        descriptor = as_descriptor(return_type)
        if isinstance(descriptor, FileType):
            return self.download_file()

        content_type = self.content_type or DEFAULT_CONTENT_TYPE
        if _media_type(content_type) != DEFAULT_CONTENT_TYPE:
            raise UnsupportedContentTypeError(content_type)

        try:
            data = json.loads(self.body)
        except json.JSONDecodeError as error:
            if descriptor == Primitive("String"):
                self._logger.debug("returning unparsed body for String response: %s", error)
                return self.body
            raise ResponseParseError(f"response body is not valid JSON: {error}") from error

        return self.build_models(data, descriptor)

    def build_models(self, data: Any, return_type: str | TypeDescriptor) -> Any:
        """Walk ``data`` and build model instances where the descriptor asks for them."""
        descriptor = as_descriptor(return_type)

        if isinstance(descriptor, (Primitive, ObjectType)):
            return data

        if isinstance(descriptor, DateTimeType):
            return self._parse_datetime(data)

        if isinstance(descriptor, ArrayOf):
            if not isinstance(data, list):
                raise DeserializationError(f"expected a JSON array for {descriptor}, got {type(data).__name__}")
            return [self.build_models(item, descriptor.item) for item in data]

        if isinstance(descriptor, MapOf):
            if not isinstance(data, dict):
                raise DeserializationError(f"expected a JSON object for {descriptor}, got {type(data).__name__}")
            return {key: self.build_models(value, descriptor.value) for key, value in data.items()}

        if isinstance(descriptor, ModelRef):
            if not isinstance(data, dict):
                raise DeserializationError(
                    f"expected a JSON object for model {descriptor.name}, got {type(data).__name__}"
                )
            return self._registry.hydrate(descriptor.name, data)

        # FileType only makes sense for the whole body.
        raise DeserializationError(f"{descriptor} cannot be nested inside another descriptor")

    def download_file(self) -> Path:
        """Write the body to the temp folder and return the written path.

        The file name comes from the ``Content-Disposition`` header when it
        carries one, otherwise a unique temporary name is used. Downloaded
        files are not tracked; moving or deleting them is up to the caller.
        """
        folder = self._config.resolve_temp_folder()
        handle, reserved = tempfile.mkstemp(dir=folder)
        os.close(handle)

        filename = self._content_disposition_filename()
        if filename:
            os.remove(reserved)
            path = Path(reserved).parent / filename
        else:
            path = Path(reserved)

        try:
            path.write_bytes(self.raw.content)
        except OSError:
            if path.exists():
                path.unlink()
            raise
        self._logger.info(
            "File written to %s. Please move the file to a proper folder for further processing "
            "and delete the temp afterwards",
            path,
        )
        return path

    def _content_disposition_filename(self) -> str | None:
        disposition = self.raw.headers.get("Content-Disposition")
        if not disposition:
            return None
        match = _FILENAME_PATTERN.search(disposition)
        if match is None:
            return None
        # Only the final path component, so the file stays inside the temp folder.
        name = Path(match.group(1)).name
        if name in ("", ".", ".."):
            return None
        return name

    @staticmethod
    def _parse_datetime(value: Any) -> datetime:
        if not isinstance(value, str):
            raise InvalidDateTimeError(f"expected an ISO-8601 string, got {type(value).__name__}")
        if _ISO_8601_PATTERN.fullmatch(value.strip()) is None:
            raise InvalidDateTimeError(f"invalid DateTime value {value!r}")
        try:
            return _datetime_adapter.validate_python(value)
        except PydanticValidationError as error:
            raise InvalidDateTimeError(f"invalid DateTime value {value!r}") from error
