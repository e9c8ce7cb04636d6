"""Next version resolution.

The next version is the latest tag reachable from HEAD, bumped by the
strongest change found in the commits made since that tag:

1. Without any tags, the initial version is reported.
2. Otherwise history is walked from HEAD in both traversal orders.
3. The greater of the tagged versions found is the base version.
4. The bump signals of both walks are combined; major beats minor beats
   patch. Without any signal the base version is reported unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ccv.config.models import CcvConfig
from ccv.core.history import LogOrder, WalkResult, walk_commits
from ccv.core.version import (
    DEFAULT_OUTPUT_PREFIX,
    BumpType,
    bump_version,
    format_version,
    parse_tag_version,
)
from ccv.exceptions import UnreachableTagsError
from ccv.vcs.git import GitRepository

if TYPE_CHECKING:
    from pathlib import Path

    import semver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Result of resolving the next version of a repository.

    Attributes:
        base: Latest tagged version reachable from HEAD, None without tags
        bump: Bump applied to ``base``
        next: The next version
        prefix: Prefix used when rendering ``next``
    """

    base: semver.Version | None
    bump: BumpType
    next: semver.Version
    prefix: str = DEFAULT_OUTPUT_PREFIX

    @property
    def tagged(self) -> bool:
        return self.base is not None

    @property
    def version(self) -> str:
        """The next version as printed, e.g. ``v1.3.0``."""
        return format_version(self.next, self.prefix)

    @property
    def version_type(self) -> str:
        """The bump category as printed, e.g. ``minor``."""
        return str(self.bump)


def _latest(first: WalkResult, second: WalkResult) -> WalkResult:
    """Pick the walk that found the greater version."""
    if not first.found:
        return second
    if not second.found or first.version > second.version:
        return first
    return second


def resolve(path: Path | str | None = None, config: CcvConfig | None = None) -> Resolution:
    """Resolve the next version of the repository at ``path``.

    Args:
        path: Repository work tree or a directory inside it
        config: Configuration; defaults when not given

    Returns:
        The resolution

    Raises:
        RepositoryOpenError: If ``path`` is not inside a git repository
        TagEnumerationError: If tags cannot be read
        HistoryWalkError: If history cannot be read
        MalformedTagError: If the latest reachable tag is not a semantic version
        UnreachableTagsError: If no tag is an ancestor of HEAD
    """
    if config is None:
        config = CcvConfig()

    with GitRepository(path) as repo:
        prefix = config.version.output_prefix

        tags = repo.get_tags()
        if not tags:
            logger.debug("No tags in %s, using initial version", repo.path)
            return Resolution(
                base=None,
                bump=config.version.initial_bump,
                next=parse_tag_version(config.version.initial_version),
                prefix=prefix,
            )

        # Both orders are needed for branches which split off before the
        # latest tag on the main line.
        main = walk_commits(repo, tags, LogOrder.DFS)
        branch = walk_commits(repo, tags, LogOrder.DFS_POST)

    if not main.found and not branch.found:
        raise UnreachableTagsError()

    latest = _latest(main, branch)
    bump = (main.signal | branch.signal).bump
    logger.debug("Latest tag is %s, bump is %s", latest.tag, bump)

    return Resolution(
        base=latest.version,
        bump=bump,
        next=bump_version(latest.version, bump),
        prefix=prefix,
    )


def next_version(path: Path | str | None = None) -> str:
    """Return the next version of the repository at ``path``, e.g. ``v1.3.0``.

    See :func:`resolve` for the errors raised.
    """
    return resolve(path).version


def next_version_type(path: Path | str | None = None) -> str:
    """Return the next bump type of the repository at ``path``.

    One of ``major``, ``minor`` or ``patch``; ``none`` if tags exist but no
    commit since the latest one asks for a release.

    See :func:`resolve` for the errors raised.
    """
    return resolve(path).version_type
