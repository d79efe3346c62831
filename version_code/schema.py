"""Component schema model.

A schema is an ordered list of named components, each reserving a fixed number
of bits in the encoded integer. The first component is the most significant.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

from version_code.errors import SchemaError

#: Width of the integer a version code must fit in.
INTEGER_BITS = 32

#: Bits available to components; the sign bit is reserved.
MAX_BITS = INTEGER_BITS - 1

#: Upper bound on the number of components (every component takes one bit or more).
MAX_COMPONENTS = MAX_BITS


@dataclass(frozen=True)
class Bits:
    """A component width, in bits."""

    value: int


def bits(value: int) -> Bits:
    """Return ``value`` as a component width."""
    return Bits(value)


bit = bits


@dataclass(frozen=True)
class ComponentSchema:
    """A named, fixed-width slice of a version.

    Attributes:
        display_name: Human readable name, also used for lookups.
        bits: Number of bits reserved for the component. Must be positive.
    """

    display_name: str
    bits: int

    def __post_init__(self) -> None:
        if isinstance(self.bits, Bits):
            object.__setattr__(self, "bits", self.bits.value)
        if not isinstance(self.display_name, str) or not self.display_name.strip():
            raise SchemaError("No component should have blank name")
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise TypeError(
                f"{self.display_name} size should be an integer, but is {type(self.bits).__name__}"
            )
        if self.bits < 0:
            raise SchemaError(
                f"No component should have negative size, but {self.display_name} is {self.bits}"
            )
        if self.bits == 0:
            raise SchemaError(
                f"All components should have positive sizes, but {self.display_name} is zero"
            )

    @property
    def max_value(self) -> int:
        """Largest value the component can hold."""
        return (1 << self.bits) - 1


def takes(display_name: str, width: Bits | int) -> ComponentSchema:
    """Declare a component, e.g. ``takes("Major", bits(7))``."""
    return ComponentSchema(display_name=display_name, bits=width)


SchemaEntry = Union[ComponentSchema, Bits, int, Sequence]


def auto_name(index: int) -> str:
    """Return the display name given to an unnamed component at ``index``."""
    return f"Component {index}"


def normalize_entry(index: int, entry: SchemaEntry) -> ComponentSchema:
    """Turn any accepted schema entry into a :class:`ComponentSchema`.

    Args:
        index: Position of the entry, used to name width-only entries.
        entry: A ``ComponentSchema``, a ``(name, width)`` pair or a bare width.

    Raises:
        SchemaError: If the entry describes an invalid component.
        TypeError: If the entry or its width is of an unsupported type.
    """
    if isinstance(entry, ComponentSchema):
        return entry
    if isinstance(entry, Bits):
        return ComponentSchema(auto_name(index), entry.value)
    if isinstance(entry, bool):
        raise TypeError(f"Unsupported schema entry: {entry!r}")
    if isinstance(entry, int):
        return ComponentSchema(auto_name(index), entry)
    if isinstance(entry, Sequence) and not isinstance(entry, str) and len(entry) == 2:
        name, width = entry
        return ComponentSchema(name, width)
    raise TypeError(f"Unsupported schema entry: {entry!r}")


def build_schema(entries: Iterable[SchemaEntry]) -> tuple[ComponentSchema, ...]:
    """Validate a whole schema and return it as an immutable tuple.

    Checks run in order: non-empty, every component valid, combined width within
    :data:`MAX_BITS`, names unique. The first violation raises.

    Raises:
        SchemaError: On the first invalid property found.
    """
    entries = list(entries)
    if not entries:
        raise SchemaError("Schema should not be empty")

    schema = tuple(normalize_entry(index, entry) for index, entry in enumerate(entries))

    total = sum(component.bits for component in schema)
    if total > MAX_BITS:
        raise SchemaError(
            f"All components combined should not take more than {MAX_BITS} bits, but total is {total}"
        )

    names = [component.display_name for component in schema]
    if len(set(names)) != len(names):
        raise SchemaError("No component should have duplicate names")

    return schema


def parse_schema_spec(spec: str) -> tuple[ComponentSchema, ...]:
    """Parse a schema written as ``"Major:7,Minor:19,Patch:5"`` or ``"5,5,5"``.

    Named and width-only entries may be mixed; width-only entries are named by
    position.

    Raises:
        SchemaError: If the text is malformed or the schema is invalid.
    """
    entries: list[SchemaEntry] = []
    for raw in spec.split(","):
        raw = raw.strip()
        if not raw:
            continue
        name, sep, width = raw.rpartition(":")
        try:
            size = int(width.strip())
        except ValueError as e:
            raise SchemaError(f"Invalid component width in '{raw}'") from e
        entries.append((name.strip(), size) if sep else size)
    return build_schema(entries)
