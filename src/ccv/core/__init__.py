"""Core business logic for ccv.

This module contains the fundamental building blocks:
- Version parsing and bumping (SemVer)
- Conventional commit classification
- History walking back to the latest tag
- Next version resolution
"""

from __future__ import annotations

from ccv.core.version import BumpType, bump_version, format_version, parse_tag_version
from ccv.core.commits import BumpSignal, classify
from ccv.core.history import LogOrder, WalkResult, iter_ancestry, walk_commits
from ccv.core.resolver import Resolution, next_version, next_version_type, resolve

__all__ = [
    # Commits
    "BumpSignal",
    # Version
    "BumpType",
    # History
    "LogOrder",
    # Resolution
    "Resolution",
    "WalkResult",
    "bump_version",
    "classify",
    "format_version",
    "iter_ancestry",
    "next_version",
    "next_version_type",
    "parse_tag_version",
    "resolve",
    "walk_commits",
]
