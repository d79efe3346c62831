"""Exceptions raised when a schema or a version value is invalid."""

from __future__ import annotations


class VersionCodeError(ValueError):
    """Base class for every validation failure in this package."""


class SchemaError(VersionCodeError):
    """The component schema has an invalid shape."""


class ComponentRangeError(VersionCodeError):
    """A component value does not fit in the bits reserved for it."""

    def __init__(self, component: str, value: int, max_value: int, bits: int) -> None:
        self.component = component
        self.value = value
        self.max_value = max_value
        self.bits = bits
        if value < 0:
            violation = "not be negative"
        else:
            violation = f"be no more than {max_value} (2^{bits}-1)"
        super().__init__(f"{component} should {violation}, but is {value}")


class ArityError(VersionCodeError):
    """The number of values does not match the number of components."""

    def __init__(self, message: str, expected: int, actual: int, missing: tuple[str, ...] = ()) -> None:
        self.expected = expected
        self.actual = actual
        self.missing = missing
        super().__init__(message)


class EncodedValueError(VersionCodeError):
    """An encoded integer cannot be produced by the given schema."""


class VersionFormatError(VersionCodeError):
    """A version string could not be parsed."""
