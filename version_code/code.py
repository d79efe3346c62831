"""Version code engine.

Packs a multi-component version into one non-negative integer and compares
versions component by component, independently of how they were packed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import total_ordering
from itertools import zip_longest

from version_code.errors import ArityError, ComponentRangeError, EncodedValueError
from version_code.schema import MAX_COMPONENTS, ComponentSchema, SchemaEntry, build_schema
from version_code.utils.helpers import join_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionComponent:
    """One component of a version code, with its value."""

    display_name: str
    bits: int
    value: int

    def __post_init__(self) -> None:
        if self.value < 0 or self.value > self.max_value:
            raise ComponentRangeError(self.display_name, self.value, self.max_value, self.bits)

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1


@total_ordering
class VersionCode:
    """An immutable version made of ordered components.

    Instances are created by :class:`Factory`. Two codes compare by their
    component values position by position, missing trailing components counting
    as zero, so codes from different factories are comparable. The encoded
    :attr:`value` is not used for comparison since it depends on the schema.
    """

    __slots__ = ("_components", "_value")

    def __init__(self, components: tuple[VersionComponent, ...]) -> None:
        self._components = components
        self._value = _pack(components)

    @property
    def value(self) -> int:
        """The encoded integer, most significant component in the highest bits."""
        return self._value

    @property
    def components(self) -> tuple[VersionComponent, ...]:
        return self._components

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(component.value for component in self._components)

    def get(self, display_name: str) -> int | None:
        """Return the value of the component named ``display_name``.

        Args:
            display_name: Exact component name.

        Returns:
            The component value, or ``None`` if no non-empty component has
            that name.
        """
        for component in self._components:
            if component.bits != 0 and component.display_name == display_name:
                return component.value
        return None

    def __getitem__(self, display_name: str) -> int:
        value = self.get(display_name)
        if value is None:
            raise KeyError(display_name)
        return value

    def __contains__(self, display_name: object) -> bool:
        return isinstance(display_name, str) and self.get(display_name) is not None

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self._components)

    def compare_to(self, other: VersionCode) -> int:
        """Compare with another code, which may come from a different factory.

        Returns:
            ``-1``, ``0`` or ``1`` as this code is lower than, equal to or
            greater than ``other``.
        """
        for mine, theirs in zip_longest(self.values, other.values, fillvalue=0):
            if mine != theirs:
                return 1 if mine > theirs else -1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionCode):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionCode):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        values = self.values
        return hash(values + (0,) * (MAX_COMPONENTS - len(values)))

    def __str__(self) -> str:
        return f"{self._value} ({'.'.join(str(value) for value in self.values)})"

    def __repr__(self) -> str:
        parts = ", ".join(f"{c.display_name}={c.value}" for c in self._components)
        return f"VersionCode({parts})"


def _pack(components: tuple[VersionComponent, ...]) -> int:
    packed = 0
    shift = 0
    for component in reversed(components):
        packed |= component.value << shift
        shift += component.bits
    return packed


class Factory:
    """Creates version codes that all share one validated schema.

    Example:
        >>> factory = Factory(("Major", 7), ("Minor", 19), ("Patch", 5))
        >>> factory.create(1, 1, 1).value
        16777249

    Args:
        *schema: Component declarations, most significant first. Each entry is
            a ``ComponentSchema``, a ``(name, width)`` pair or a bare width;
            bare widths are named ``"Component <index>"``.

    Raises:
        SchemaError: If the schema is empty, has a non-positive width or a
            blank or duplicate name, or needs more than 31 bits.
    """

    __slots__ = ("_schema",)

    def __init__(self, *schema: SchemaEntry) -> None:
        self._schema = build_schema(schema)
        logger.debug(
            "Created version code factory",
            extra={"components": [c.display_name for c in self._schema], "bits": self.total_bits},
        )

    @property
    def schema(self) -> tuple[ComponentSchema, ...]:
        return self._schema

    @property
    def total_bits(self) -> int:
        return sum(component.bits for component in self._schema)

    @property
    def max_value(self) -> int:
        """Largest encoded value this factory can produce."""
        return (1 << self.total_bits) - 1

    def __len__(self) -> int:
        return len(self._schema)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Factory):
            return NotImplemented
        return self._schema == other._schema

    def __hash__(self) -> int:
        return hash(self._schema)

    def __repr__(self) -> str:
        parts = ", ".join(f"{c.display_name}:{c.bits}" for c in self._schema)
        return f"Factory({parts})"

    def create(self, *values: int) -> VersionCode:
        """Create a version code from one value per component, in schema order.

        Raises:
            ArityError: If too few or too many values are given.
            ComponentRangeError: If a value is negative or too large for its
                component.
            TypeError: If a value is not an integer.
        """
        self._validate_arity(values)
        components = []
        for value, component in zip(values, self._schema):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{component.display_name} should be an integer, but is {type(value).__name__}"
                )
            components.append(VersionComponent(component.display_name, component.bits, value))
        return VersionCode(tuple(components))

    def decode(self, encoded: int) -> VersionCode:
        """Unpack an encoded value produced with this factory's schema.

        Raises:
            EncodedValueError: If ``encoded`` is negative or needs more bits
                than the schema has.
        """
        if encoded < 0 or encoded > self.max_value:
            raise EncodedValueError(
                f"Encoded value should be between 0 and {self.max_value}, but is {encoded}"
            )
        values = []
        for component in reversed(self._schema):
            values.append(encoded & component.max_value)
            encoded >>= component.bits
        return self.create(*reversed(values))

    def _validate_arity(self, values: tuple[int, ...]) -> None:
        expected = len(self._schema)
        if len(values) < expected:
            missing = tuple(c.display_name for c in self._schema[len(values):])
            raise ArityError(
                f"Missing value for: {join_names(missing)}",
                expected=expected,
                actual=len(values),
                missing=missing,
            )
        if len(values) > expected:
            raise ArityError(
                f"Expected {expected} components, but got {len(values)}",
                expected=expected,
                actual=len(values),
            )
