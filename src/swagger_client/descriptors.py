"""Return type descriptors.

Generated endpoint methods declare the shape of their response with a short
descriptor string such as ``"Pet"``, ``"Array<Pet>"`` or
``"Hash<String, Integer>"``. The string is parsed once into one of the
descriptor classes below and the deserializer dispatches on that value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TypeAlias

from .errors import DescriptorError

PRIMITIVE_NAMES = frozenset({"String", "Integer", "Float", "BOOLEAN"})

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_ARRAY_PREFIX = "Array<"
_HASH_PREFIX = "Hash<"


@dataclass(frozen=True, slots=True)
class Primitive:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class DateTimeType:
    def __str__(self) -> str:
        return "DateTime"


@dataclass(frozen=True, slots=True)
class ObjectType:
    def __str__(self) -> str:
        return "Object"


@dataclass(frozen=True, slots=True)
class FileType:
    def __str__(self) -> str:
        return "File"


@dataclass(frozen=True, slots=True)
class ArrayOf:
    item: TypeDescriptor

    def __str__(self) -> str:
        return f"Array<{self.item}>"


@dataclass(frozen=True, slots=True)
class MapOf:
    value: TypeDescriptor

    def __str__(self) -> str:
        return f"Hash<String, {self.value}>"


@dataclass(frozen=True, slots=True)
class ModelRef:
    name: str

    def __str__(self) -> str:
        return self.name


TypeDescriptor: TypeAlias = Primitive | DateTimeType | ObjectType | FileType | ArrayOf | MapOf | ModelRef

_SINGLETONS: dict[str, TypeDescriptor] = {
    "DateTime": DateTimeType(),
    "Object": ObjectType(),
    "File": FileType(),
}


def _split_map_arguments(inner: str, source: str) -> tuple[str, str]:
    depth = 0
    for index, char in enumerate(inner):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == "," and depth == 0:
            return inner[:index].strip(), inner[index + 1 :].strip()
    raise DescriptorError(f"hash descriptor needs a key and a value type: {source!r}")


def _parse(text: str, source: str) -> TypeDescriptor:
    if not text:
        raise DescriptorError(f"empty type descriptor in {source!r}")

    if text.startswith(_ARRAY_PREFIX):
        if not text.endswith(">"):
            raise DescriptorError(f"unterminated array descriptor: {source!r}")
        return ArrayOf(_parse(text[len(_ARRAY_PREFIX) : -1].strip(), source))

    if text.startswith(_HASH_PREFIX):
        if not text.endswith(">"):
            raise DescriptorError(f"unterminated hash descriptor: {source!r}")
        key, value = _split_map_arguments(text[len(_HASH_PREFIX) : -1], source)
        if key != "String":
            raise DescriptorError(f"hash keys must be String, got {key!r} in {source!r}")
        return MapOf(_parse(value, source))

    if text in PRIMITIVE_NAMES:
        return Primitive(text)

    singleton = _SINGLETONS.get(text)
    if singleton is not None:
        return singleton

    if _IDENTIFIER.fullmatch(text) is None:
        raise DescriptorError(f"invalid type descriptor {text!r} in {source!r}")
    return ModelRef(text)


@lru_cache(maxsize=256)
def parse_descriptor(text: str) -> TypeDescriptor:
    """Parse a descriptor string into its :data:`TypeDescriptor` value.

    Raises :class:`DescriptorError` for empty, unbalanced or otherwise
    malformed descriptors. Any bare identifier that is not a grammar token is
    taken to be a model name; whether that model exists is checked at
    deserialization time against the registry.
    """
    if not isinstance(text, str):
        raise DescriptorError(f"type descriptor must be a string, got {type(text).__name__}")
    return _parse(text.strip(), text)


def as_descriptor(value: str | TypeDescriptor) -> TypeDescriptor:
    if isinstance(value, str):
        return parse_descriptor(value)
    return value
