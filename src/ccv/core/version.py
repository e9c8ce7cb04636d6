"""Semantic version parsing and bumping.

Versions are ``semver.Version`` objects; this module adds the bump
categories and the rules for turning tag names into versions and versions
back into output strings.
"""

from __future__ import annotations

from enum import StrEnum

import semver

from ccv.exceptions import MalformedTagError

DEFAULT_INITIAL_VERSION = "0.1.0"
DEFAULT_OUTPUT_PREFIX = "v"


class BumpType(StrEnum):
    """Version bump categories, from strongest to weakest."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"


def parse_tag_version(tag: str) -> semver.Version:
    """Parse a tag name into a semantic version.

    One leading ``v`` is accepted, and minor and patch may be left out:

    >>> str(parse_tag_version("v1.2"))
    '1.2.0'

    Raises:
        MalformedTagError: If the tag is not a semantic version
    """
    text = tag[1:] if tag.startswith("v") else tag
    try:
        return semver.Version.parse(text, optional_minor_and_patch=True)
    except ValueError as e:
        raise MalformedTagError(tag) from e


def bump_version(version: semver.Version, bump: BumpType) -> semver.Version:
    """Apply a bump to a version.

    Bumped versions never carry pre-release or build data. A patch bump of a
    pre-release only drops the pre-release part, since ``1.2.3-rc.1``
    precedes ``1.2.3``.
    """
    match bump:
        case BumpType.MAJOR:
            return version.bump_major()
        case BumpType.MINOR:
            return version.bump_minor()
        case BumpType.PATCH:
            if version.prerelease:
                return version.finalize_version()
            return version.bump_patch()
        case _:
            return version


def format_version(version: semver.Version, prefix: str = DEFAULT_OUTPUT_PREFIX) -> str:
    """Render a version for output, e.g. ``v1.2.3``."""
    return f"{prefix}{version}"
