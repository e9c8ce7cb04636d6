"""Exception hierarchy for ccv.

Every error raised by the library derives from :class:`CcvError`, so
callers can catch a single type. Errors are raised with context and
chained to their cause; nothing is logged and swallowed.
"""

from __future__ import annotations


class CcvError(Exception):
    """Base class for all ccv errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(CcvError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """A configuration file does not exist."""


class ConfigValidationError(ConfigError):
    """A configuration file exists but holds invalid values."""


# =============================================================================
# Git
# =============================================================================


class GitError(CcvError):
    """Base class for repository errors."""


class GitCommandError(GitError):
    """A git subprocess exited with an error."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr.strip() if stderr else None
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class RepositoryOpenError(GitError):
    """The path is not inside a git repository."""


class TagEnumerationError(GitError):
    """Tag references could not be read."""


class HistoryWalkError(GitError):
    """Commit ancestry could not be iterated."""


# =============================================================================
# Version resolution
# =============================================================================


class VersionError(CcvError):
    """Base class for version resolution errors."""


class MalformedTagError(VersionError):
    """A tag reachable from HEAD is not a semantic version."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f'couldn\'t parse tag "{tag}" as a semantic version')


class UnreachableTagsError(VersionError):
    """Tags exist in the repository, but none of them is an ancestor of HEAD."""

    def __init__(self) -> None:
        super().__init__("tags exist in the repository, but not in ancestors of HEAD")
