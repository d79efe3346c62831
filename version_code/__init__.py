"""Top-level package for `version_code`.

Encodes a multi-component version into one bounded integer and compares
versions built from different schemas.
"""

from .__about__ import __version__
from .code import Factory, VersionCode, VersionComponent
from .errors import (
    ArityError,
    ComponentRangeError,
    EncodedValueError,
    SchemaError,
    VersionCodeError,
    VersionFormatError,
)
from .schema import MAX_BITS, Bits, ComponentSchema, bit, bits, parse_schema_spec, takes
from .semantic import SemanticVersion, parse_semantic_version

__all__ = [
    "__version__",
    "ArityError",
    "Bits",
    "ComponentRangeError",
    "ComponentSchema",
    "EncodedValueError",
    "Factory",
    "MAX_BITS",
    "SchemaError",
    "SemanticVersion",
    "VersionCode",
    "VersionCodeError",
    "VersionComponent",
    "VersionFormatError",
    "bit",
    "bits",
    "parse_schema_spec",
    "parse_semantic_version",
    "takes",
]
