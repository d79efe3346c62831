"""Test the schema module."""

from __future__ import annotations

import pytest

from version_code.errors import SchemaError
from version_code.schema import (
    MAX_BITS,
    ComponentSchema,
    bit,
    bits,
    build_schema,
    parse_schema_spec,
    takes,
)


def test_empty_schema_is_rejected() -> None:
    with pytest.raises(SchemaError, match="^Schema should not be empty$"):
        build_schema([])


@pytest.mark.parametrize("size", range(32, 41))
def test_single_component_too_large_reports_total(size: int) -> None:
    with pytest.raises(SchemaError) as error:
        build_schema([takes("Major", bits(size))])

    assert str(error.value) == (
        f"All components combined should not take more than 31 bits, but total is {size}"
    )


@pytest.mark.parametrize(
    "sizes",
    [(10, 10, 10, 2), (31, 1), (30, 1, 1), (30, 40)],
)
def test_combined_components_too_large_reports_total(sizes: tuple[int, ...]) -> None:
    schema = [takes(str(idx), bits(size)) for idx, size in enumerate(sizes)]

    with pytest.raises(SchemaError) as error:
        build_schema(schema)

    assert str(error.value).endswith(f"but total is {sum(sizes)}")


def test_exactly_max_bits_is_accepted() -> None:
    schema = build_schema([takes("Major", bits(30)), takes("Minor", bit(1))])

    assert sum(component.bits for component in schema) == MAX_BITS


@pytest.mark.parametrize("size", [-10, -3, -1])
def test_negative_component_size_names_component(size: int) -> None:
    with pytest.raises(SchemaError) as error:
        build_schema([takes("Major", bits(2)), takes("Minor", bits(3)), takes("Patch", bits(size))])

    assert str(error.value) == f"No component should have negative size, but Patch is {size}"


def test_zero_component_size_names_component() -> None:
    with pytest.raises(SchemaError, match="^All components should have positive sizes, but Major is zero$"):
        build_schema([takes("Major", bits(0)), takes("Minor", bits(2))])


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(SchemaError, match="^No component should have duplicate names$"):
        build_schema([takes("Major", bits(2)), takes("Major", bits(4))])


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_rejected(name: str) -> None:
    with pytest.raises(SchemaError, match="blank name"):
        ComponentSchema(name, 3)


def test_width_only_entries_are_named_by_position() -> None:
    schema = build_schema([9, bits(9), ("Build", 4)])

    assert [component.display_name for component in schema] == ["Component 0", "Component 1", "Build"]
    assert [component.bits for component in schema] == [9, 9, 4]


def test_component_schema_is_immutable() -> None:
    component = takes("Major", bits(7))

    with pytest.raises(AttributeError):
        component.bits = 8  # type: ignore[misc]


def test_component_schema_max_value() -> None:
    assert takes("Patch", bits(5)).max_value == 31


def test_unsupported_entry_type() -> None:
    with pytest.raises(TypeError):
        build_schema([1.5])


def test_parse_schema_spec_mixes_named_and_width_only_entries() -> None:
    schema = parse_schema_spec("Major:7, 19 ,Patch:5")

    assert [(c.display_name, c.bits) for c in schema] == [
        ("Major", 7),
        ("Component 1", 19),
        ("Patch", 5),
    ]


@pytest.mark.parametrize("spec", ["Major:x", "Major:7,Minor:"])
def test_parse_schema_spec_rejects_bad_widths(spec: str) -> None:
    with pytest.raises(SchemaError, match="Invalid component width"):
        parse_schema_spec(spec)


def test_parse_schema_spec_validates_schema() -> None:
    with pytest.raises(SchemaError, match="total is 32"):
        parse_schema_spec("16,16")


@pytest.mark.parametrize("width", [7.9, 7.5, "7", True])
def test_non_integer_width_is_rejected(width: object) -> None:
    with pytest.raises(TypeError, match="^Major size should be an integer"):
        ComponentSchema("Major", width)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="^Major size should be an integer"):
        takes("Major", width)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="^Major size should be an integer"):
        build_schema([("Major", width)])


def test_non_integer_width_inside_bits_is_rejected() -> None:
    with pytest.raises(TypeError, match="^Component 0 size should be an integer, but is float$"):
        build_schema([bits(7.5)])  # type: ignore[arg-type]
