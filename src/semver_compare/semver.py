# SPDX-License-Identifier: MIT
"""Semantic version record and parser.

Parses ``MAJOR.MINOR.PATCH`` strings with optional pre-release and build
metadata:
- Pre-release: text after the first ``-`` (``1.0.0-alpha``, ``1.0.0-rc.1``)
- Build metadata: text after the first ``+`` (``1.0.0+001``, ``1.0.0+build.7``)

Only the numeric core is validated. Leading zeros, empty identifiers after a
trailing separator and arbitrary identifier characters are accepted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .normalize import VERSION_PATTERN

logger = logging.getLogger(__name__)

# Largest value accepted for a major, minor or patch component (int64).
MAX_COMPONENT = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")

_COMPONENT_NAMES = ("major", "minor", "patch")


class InvalidVersionError(Exception):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class FormatError(InvalidVersionError):
    """The numeric core does not split into exactly three dot-separated parts."""

    def __init__(self, version: str, segments: int, message: str = ""):
        self.segments = segments
        super().__init__(
            version,
            message
            or f"Invalid semantic version {version!r}: expected 3 dot-separated "
            f"components, found {segments}",
        )


class NumericParseError(InvalidVersionError):
    """A major, minor or patch component is not a valid integer."""

    def __init__(self, version: str, segment: str, position: int, reason: str = "is not an integer"):
        self.segment = segment
        self.position = position
        super().__init__(
            version,
            f"Invalid semantic version {version!r}: "
            f"{_COMPONENT_NAMES[position]} component {segment!r} {reason}",
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release qualifier, empty when absent (e.g. "alpha", "rc.1")
        build_metadata: Build metadata, empty when absent; never used for ordering
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build_metadata: str = ""

    def __str__(self) -> str:
        """Return the string form of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build_metadata:
            version += f"+{self.build_metadata}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release qualifier."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _first_segment(value: str, separator: str) -> tuple[str, str]:
    # Text before the first separator, and text between the first and the
    # second one. Anything after a second separator is dropped.
    head, _, tail = value.partition(separator)
    return head, tail.partition(separator)[0]


def _parse_component(version: str, segment: str, position: int) -> int:
    name = _COMPONENT_NAMES[position]
    if not _DIGITS.fullmatch(segment):
        logger.debug("Non-numeric %s component %r in %r", name, segment, version)
        raise NumericParseError(version, segment, position)

    value = int(segment)
    if value > MAX_COMPONENT:
        logger.debug("Out of range %s component %r in %r", name, segment, version)
        raise NumericParseError(version, segment, position, "exceeds the 64-bit limit")
    return value


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    The string is expected to be already normalized (see ``normalize``);
    prefixes such as ``v`` are not stripped here.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        FormatError: If the numeric core does not have exactly three parts
        NumericParseError: If a numeric part is not an integer

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build_metadata='')

        >>> parse_version("1.2.3-rc+42")
        Version(major=1, minor=2, patch=3, prerelease='rc', build_metadata='42')
    """
    if not isinstance(version_string, str):
        raise FormatError(
            str(version_string),
            0,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    core = version_string
    build_metadata = ""
    prerelease = ""

    if "+" in core:
        core, build_metadata = _first_segment(core, "+")
    if "-" in core:
        core, prerelease = _first_segment(core, "-")

    segments = core.split(".")
    if len(segments) != 3:
        logger.debug("Version %r has %d components", version_string, len(segments))
        raise FormatError(version_string, len(segments))

    major, minor, patch = (
        _parse_component(version_string, segment, position)
        for position, segment in enumerate(segments)
    )

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build_metadata=build_metadata,
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is exactly one version, with nothing around it.

    Examples:
        >>> is_valid_semver("1.0.0-alpha+001")
        True
        >>> is_valid_semver("v1.0.0")
        False
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.fullmatch(version_string.strip()) is not None
