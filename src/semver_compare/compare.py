# SPDX-License-Identifier: MIT
"""Version precedence.

Ordering rules, first match wins:
1. Both versions have a pre-release: the qualifiers are compared as plain
   strings (code-point order). Unequal qualifiers decide the result on
   their own, whatever the numeric components are.
2. Only one version has a pre-release: that version comes first.
3. Otherwise major, minor and patch are compared in turn.

Pre-release qualifiers are treated as opaque strings, so ``rc.10`` sorts
before ``rc.2``. Stricter SemVer consumers split on dots and compare numeric
identifiers numerically; this module does not.

Build metadata is ignored.
"""

from __future__ import annotations

from typing import Union

from .normalize import normalize
from .semver import Version, parse_version


def _cmp(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(normalize(version))


def compare(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    String arguments are normalized first, so ``"v1.2.3"`` and
    ``"release 1.2.3"`` are accepted.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 precedes version2
        0 if they are equal in precedence
        1 if version1 follows version2

    Raises:
        FormatError: If either version has no MAJOR.MINOR.PATCH core
        NumericParseError: If a numeric component of either version is invalid

    Examples:
        >>> compare("1.0.0", "1.0.0")
        0
        >>> compare("1.0.1", "1.0.0")
        1
        >>> compare("1.0.0-alpha", "1.0.0-beta")
        -1
        >>> compare("1.0.0+X", "1.0.0+Y")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1.prerelease and v2.prerelease:
        result = _cmp(v1.prerelease, v2.prerelease)
        if result != 0:
            return result
    elif v1.prerelease:
        return -1
    elif v2.prerelease:
        return 1

    for attr in ("major", "minor", "patch"):
        result = _cmp(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    return 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key that orders versions the same way ``compare`` does.

    Examples:
        >>> sorted(["2.0.0", "1.0.0-beta", "1.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0-beta', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    # Releases sort after every pre-release; pre-releases sort by qualifier
    # before their numeric core.
    return (not v.is_prerelease, v.prerelease, v.major, v.minor, v.patch)
