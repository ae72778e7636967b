from __future__ import annotations

import pytest

from swagger_client.descriptors import (
    ArrayOf,
    DateTimeType,
    FileType,
    MapOf,
    ModelRef,
    ObjectType,
    Primitive,
    as_descriptor,
    parse_descriptor,
)
from swagger_client.errors import DescriptorError


@pytest.mark.parametrize("name", ["String", "Integer", "Float", "BOOLEAN"])
def test_primitive_names_parse_to_primitive(name: str) -> None:
    assert parse_descriptor(name) == Primitive(name)


def test_grammar_tokens_parse_to_their_variants() -> None:
    assert parse_descriptor("DateTime") == DateTimeType()
    assert parse_descriptor("Object") == ObjectType()
    assert parse_descriptor("File") == FileType()
    assert parse_descriptor("Pet") == ModelRef("Pet")


def test_nested_containers_parse_recursively() -> None:
    descriptor = parse_descriptor("Hash<String, Array<Hash<String, Pet>>>")

    assert descriptor == MapOf(ArrayOf(MapOf(ModelRef("Pet"))))
    assert str(descriptor) == "Hash<String, Array<Hash<String, Pet>>>"


def test_hash_descriptor_tolerates_missing_space_after_comma() -> None:
    assert parse_descriptor("Hash<String,Integer>") == MapOf(Primitive("Integer"))


def test_as_descriptor_passes_parsed_values_through() -> None:
    descriptor = ArrayOf(Primitive("Integer"))
    assert as_descriptor(descriptor) is descriptor
    assert as_descriptor("Array<Integer>") == descriptor


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Array<Pet",
        "Array<>",
        "Hash<String>",
        "Hash<Integer, Pet>",
        "Pet Store",
        "Array<Pet>>",
    ],
)
def test_malformed_descriptors_raise(text: str) -> None:
    with pytest.raises(DescriptorError):
        parse_descriptor(text)
