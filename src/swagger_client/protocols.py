"""Protocol contracts for the transport and model collaborators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RawResponse(Protocol):
    """A completed HTTP exchange as handed over by the transport.

    ``httpx.Response`` satisfies this protocol.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def content(self) -> bytes: ...

    @property
    def text(self) -> str: ...


@runtime_checkable
class HydratableModel(Protocol):
    @classmethod
    def build_from_hash(cls, data: Mapping[str, Any]) -> Any: ...
