# SPDX-License-Identifier: MIT
"""Extraction of version-like substrings from arbitrary text.

Inputs such as ``v1.2.3``, ``release 2.0.0-rc.1 (stable)`` or tool output
lines are reduced to the first ``MAJOR.MINOR.PATCH[-pre][+build]`` run found
in them before parsing.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Leftmost-match extraction pattern. Identifiers after "-" and "+" are
# dot-separated runs of alphanumerics and hyphens.
VERSION_PATTERN = re.compile(
    r"[0-9]+\.[0-9]+\.[0-9]+"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)


def normalize(text: str) -> str:
    """Return the first version-like substring of ``text``.

    Args:
        text: Any string, possibly with a ``v`` prefix or surrounding words

    Returns:
        The leftmost match of VERSION_PATTERN, or an empty string when the
        text contains no version

    Examples:
        >>> normalize("v1.2.3-rc.1 (stable)")
        '1.2.3-rc.1'
        >>> normalize("1.0.0 then 2.0.0")
        '1.0.0'
        >>> normalize("no version here")
        ''
    """
    if not isinstance(text, str):
        return ""

    match = VERSION_PATTERN.search(text)
    if match is None:
        logger.debug("No version found in %r", text)
        return ""
    return match.group(0)
