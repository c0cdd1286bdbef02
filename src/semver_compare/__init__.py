# SPDX-License-Identifier: MIT
"""Semantic version extraction, parsing and comparison.

Example:
    >>> from semver_compare import compare, parse_version, normalize
    >>>
    >>> normalize("v1.2.3-rc.1 (stable)")
    '1.2.3-rc.1'
    >>> version = parse_version("1.2.3-rc+42")
    >>> version.prerelease, version.build_metadata
    ('rc', '42')
    >>> compare("1.0.0-beta+001", "1.0.0-alpha+001")
    1
"""

__version__ = "0.1.0"

from .normalize import (
    VERSION_PATTERN,
    normalize,
)
from .semver import (
    MAX_COMPONENT,
    FormatError,
    InvalidVersionError,
    NumericParseError,
    Version,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare,
    version_key,
)

__all__ = [
    # Extraction
    "VERSION_PATTERN",
    "normalize",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "MAX_COMPONENT",
    # Errors
    "InvalidVersionError",
    "FormatError",
    "NumericParseError",
    # Version comparison
    "compare",
    "version_key",
]
