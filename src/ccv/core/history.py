"""Walking commit history back to the latest tag.

History is walked from HEAD until a tagged commit is reached, collecting
the bump signal of every commit passed on the way. Two traversal orders
exist because a merge joins parent lines that may reach different tags:

- ``LogOrder.DFS`` explores the first parent line completely before the
  next parent.
- ``LogOrder.DFS_POST`` pushes all parents on a stack and continues with
  the last one, visiting merge parents in the opposite sequence.

For a branch that split off before a tag landed on the main line, one of
the two orders reaches that tag first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from ccv.core.commits import BumpSignal, classify
from ccv.core.version import parse_tag_version

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    import semver

    from ccv.vcs.git import Commit, GitRepository

logger = logging.getLogger(__name__)


class LogOrder(StrEnum):
    """Commit traversal orders."""

    DFS = "dfs"
    DFS_POST = "dfs-post"


@dataclass(frozen=True)
class WalkResult:
    """Outcome of walking history in one order.

    ``tag`` and ``version`` are None when the walk ran out of history
    without meeting a tagged commit.
    """

    tag: str | None = None
    version: semver.Version | None = None
    signal: BumpSignal = field(default_factory=BumpSignal)

    @property
    def found(self) -> bool:
        return self.version is not None


def iter_ancestry(head: str, graph: Mapping[str, Commit], order: LogOrder) -> Iterator[Commit]:
    """Yield every commit reachable from ``head`` once, in the given order.

    Parents missing from ``graph`` (e.g. in a shallow clone) are skipped.
    """
    if order == LogOrder.DFS:
        yield from _iter_dfs(head, graph)
    else:
        yield from _iter_dfs_post(head, graph)


def _iter_dfs(head: str, graph: Mapping[str, Commit]) -> Iterator[Commit]:
    seen: set[str] = set()
    stack: list[Iterator[str]] = [iter((head,))]
    while stack:
        sha = next(stack[-1], None)
        if sha is None:
            stack.pop()
            continue
        if sha in seen or sha not in graph:
            continue
        seen.add(sha)
        commit = graph[sha]
        yield commit
        if commit.parents:
            stack.append(iter(commit.parents))


def _iter_dfs_post(head: str, graph: Mapping[str, Commit]) -> Iterator[Commit]:
    seen: set[str] = set()
    stack = [head]
    while stack:
        sha = stack.pop()
        if sha in seen or sha not in graph:
            continue
        seen.add(sha)
        commit = graph[sha]
        yield commit
        stack.extend(commit.parents)


def walk_commits(repo: GitRepository, tags: Mapping[str, str], order: LogOrder) -> WalkResult:
    """Walk history from HEAD back to the first tagged commit.

    The tagged commit itself is not classified; it belongs to the release
    it is tagged as.

    Args:
        repo: Repository to walk
        tags: Mapping of commit hash to tag name
        order: Traversal order

    Returns:
        The tag found (if any), its version and the combined bump signal of
        the commits walked before reaching it

    Raises:
        HistoryWalkError: If history cannot be read
        MalformedTagError: If the tag found is not a semantic version
    """
    head = repo.get_head()
    graph = repo.get_commit_graph()

    signal = BumpSignal()
    for commit in iter_ancestry(head, graph, order):
        tag = tags.get(commit.sha)
        if tag is not None:
            version = parse_tag_version(tag)
            logger.debug("%s walk reached tag %s at %s", order, tag, commit.short_sha)
            return WalkResult(tag=tag, version=version, signal=signal)
        signal |= classify(commit.message)

    logger.debug("%s walk found no tag in ancestors of HEAD", order)
    return WalkResult()
