"""Conventional commit classification.

Each commit message is checked against three independent patterns:

- ``fix:`` / ``fix(scope):`` signals a patch release
- ``feat:`` / ``feat(scope):`` signals a minor release
- ``fix!:`` / ``feat(scope)!:`` or a ``BREAKING CHANGE: `` footer anywhere
  in the message signals a major release

Matching is case-sensitive. No other commit types affect the version.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ccv.core.version import BumpType

PATCH_PATTERN = re.compile(r"^fix(\(.+\))?: ")
MINOR_PATTERN = re.compile(r"^feat(\(.+\))?: ")
MAJOR_PATTERN = re.compile(r"^(fix|feat)(\(.+\))?!: |BREAKING CHANGE: ")


@dataclass(frozen=True)
class BumpSignal:
    """Which bump categories a set of commits asks for.

    Signals are combined with ``|``; once a bit is set it stays set.
    """

    major: bool = False
    minor: bool = False
    patch: bool = False

    def __or__(self, other: BumpSignal) -> BumpSignal:
        if not isinstance(other, BumpSignal):
            return NotImplemented
        return BumpSignal(
            major=self.major or other.major,
            minor=self.minor or other.minor,
            patch=self.patch or other.patch,
        )

    def __bool__(self) -> bool:
        return self.major or self.minor or self.patch

    @property
    def bump(self) -> BumpType:
        """The strongest bump asked for (major > minor > patch > none)."""
        if self.major:
            return BumpType.MAJOR
        if self.minor:
            return BumpType.MINOR
        if self.patch:
            return BumpType.PATCH
        return BumpType.NONE


def classify(message: str) -> BumpSignal:
    """Classify a full commit message.

    Args:
        message: Commit message, subject and body

    Returns:
        The bump signal carried by the message
    """
    # `^` anchors at the start of the message; the footer may appear anywhere.
    return BumpSignal(
        major=MAJOR_PATTERN.search(message) is not None,
        minor=MINOR_PATTERN.match(message) is not None,
        patch=PATCH_PATTERN.match(message) is not None,
    )

