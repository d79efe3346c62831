"""Major/minor/patch convenience built on :class:`~version_code.code.Factory`.

Bit split policy: Major takes 7 bits (0-127), Minor 19 bits (0-524287) and
Patch 5 bits (0-31), filling the 31 available bits.
"""

from __future__ import annotations

from functools import total_ordering

from version_code.code import Factory, VersionCode
from version_code.errors import VersionFormatError
from version_code.schema import bits, takes
from version_code.utils.helpers import split_dotted

MAJOR_NAME = "Major"
MINOR_NAME = "Minor"
PATCH_NAME = "Patch"

MAJOR_BITS = bits(7)
MINOR_BITS = bits(19)
PATCH_BITS = bits(5)

SEMANTIC_FACTORY = Factory(
    takes(MAJOR_NAME, MAJOR_BITS),
    takes(MINOR_NAME, MINOR_BITS),
    takes(PATCH_NAME, PATCH_BITS),
)


@total_ordering
class SemanticVersion:
    """A ``major.minor.patch`` version encoded as a single integer.

    Args:
        major: Major component, 0 to 127.
        minor: Minor component, 0 to 524287.
        patch: Patch component, 0 to 31.

    Raises:
        ComponentRangeError: If a component is out of range.
    """

    __slots__ = ("_code",)

    def __init__(self, major: int, minor: int, patch: int) -> None:
        self._code = SEMANTIC_FACTORY.create(major, minor, patch)

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse ``"X.Y.Z"``.

        Raises:
            VersionFormatError: If the text is not three dot-separated integers.
            ComponentRangeError: If a component is out of range.
        """
        try:
            numbers = split_dotted(text)
        except ValueError as e:
            raise VersionFormatError(f"Invalid semantic version '{text}': {e}") from e
        if len(numbers) != 3:
            raise VersionFormatError(
                f"Invalid semantic version '{text}': expected 3 components, but got {len(numbers)}"
            )
        return cls(*numbers)

    @property
    def version_code(self) -> VersionCode:
        return self._code

    @property
    def value(self) -> int:
        return self._code.value

    @property
    def major(self) -> int:
        return self._code[MAJOR_NAME]

    @property
    def minor(self) -> int:
        return self._code[MINOR_NAME]

    @property
    def patch(self) -> int:
        return self._code[PATCH_NAME]

    def with_major(self, major: int) -> SemanticVersion:
        return SemanticVersion(major, self.minor, self.patch)

    def with_minor(self, minor: int) -> SemanticVersion:
        return SemanticVersion(self.major, minor, self.patch)

    def with_patch(self, patch: int) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, patch)

    def bump_major(self) -> SemanticVersion:
        """Return a copy with major incremented; minor and patch are kept."""
        return self.with_major(self.major + 1)

    def bump_minor(self) -> SemanticVersion:
        return self.with_minor(self.minor + 1)

    def bump_patch(self) -> SemanticVersion:
        return self.with_patch(self.patch + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return str(self._code)

    def __repr__(self) -> str:
        return f"SemanticVersion({self.major}.{self.minor}.{self.patch})"


def parse_semantic_version(text: str) -> SemanticVersion:
    """Parse ``"X.Y.Z"`` into a :class:`SemanticVersion`."""
    return SemanticVersion.parse(text)
