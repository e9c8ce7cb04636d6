"""ccv: next semantic version from conventional commits.

Typical use::

    from ccv import next_version, next_version_type

    next_version(".")       # "v1.3.0"
    next_version_type(".")  # "minor"
"""

from __future__ import annotations

from ccv.core import BumpType, Resolution, next_version, next_version_type, resolve
from ccv.exceptions import (
    CcvError,
    HistoryWalkError,
    MalformedTagError,
    RepositoryOpenError,
    TagEnumerationError,
    UnreachableTagsError,
)

__version__ = "0.1.0"

__all__ = [
    "BumpType",
    "CcvError",
    "HistoryWalkError",
    "MalformedTagError",
    "RepositoryOpenError",
    "Resolution",
    "TagEnumerationError",
    "UnreachableTagsError",
    "__version__",
    "next_version",
    "next_version_type",
    "resolve",
]
