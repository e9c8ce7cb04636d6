"""Read-only access to a git repository.

The repository is queried through the ``git`` executable. Output is
requested in NUL/unit-separator delimited formats so that commit messages
of any shape survive parsing.

Nothing in this module writes to the repository.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from ccv.exceptions import (
    GitCommandError,
    HistoryWalkError,
    RepositoryOpenError,
    TagEnumerationError,
)

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

# Separates fields within one record of `git log` / `git for-each-ref` output
_FIELD_SEP = "\x1f"
_TAG_FORMAT = _FIELD_SEP.join(["%(objectname)", "%(*objectname)", "%(refname:strip=2)"])
_LOG_FORMAT = _FIELD_SEP.join(["%H", "%P", "%B"])


@dataclass(frozen=True)
class Commit:
    """A single commit in the ancestry graph."""

    sha: str
    message: str
    parents: tuple[str, ...] = field(default=())

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


class GitRepository:
    """A git work tree opened for reading.

    The repository is located the way ``git`` locates it: ``path`` may be
    the work tree root or any directory below it.

    Use it as a context manager so that data loaded during a resolution is
    released when the resolution ends::

        with GitRepository(path) as repo:
            tags = repo.get_tags()
    """

    def __init__(self, path: Path | str | None = None) -> None:
        start = Path(path) if path is not None else Path.cwd()
        if not start.is_dir():
            raise RepositoryOpenError(f"couldn't open git repository: {start} is not a directory")

        try:
            toplevel = self._run(["rev-parse", "--show-toplevel"], cwd=start).strip()
        except GitCommandError as e:
            raise RepositoryOpenError(f"couldn't open git repository at {start}: {e}") from e

        if not toplevel:
            # bare repositories have no work tree
            raise RepositoryOpenError(f"couldn't open git repository at {start}: no work tree")

        self.path = Path(toplevel)
        self._graph: dict[str, Commit] | None = None
        logger.debug("Opened git repository at %s", self.path)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Drop everything loaded from the repository."""
        self._graph = None

    def _run(self, args: list[str], cwd: Path | None = None) -> str:
        """Run a git command and return its standard output.

        Raises:
            GitCommandError: If git is missing or exits with an error
        """
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                cwd=cwd if cwd is not None else self.path,
            )
        except FileNotFoundError as e:
            raise GitCommandError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def get_tags(self) -> dict[str, str]:
        """Map commit hashes to the names of the tags pointing at them.

        Annotated tags are peeled to the commit they refer to. If several
        tags point at the same commit, the one with the highest version-aware
        name wins.

        Returns:
            Mapping of full commit hash to tag name

        Raises:
            TagEnumerationError: If the tag references cannot be read
        """
        try:
            output = self._run(
                [
                    "for-each-ref",
                    "--sort=version:refname",
                    f"--format={_TAG_FORMAT}",
                    "refs/tags",
                ]
            )
        except GitCommandError as e:
            raise TagEnumerationError(f"couldn't get tags: {e}") from e

        tags: dict[str, str] = {}
        for line in output.splitlines():
            if not line:
                continue
            try:
                target, peeled, name = line.split(_FIELD_SEP)
            except ValueError as e:
                raise TagEnumerationError(f"couldn't iterate tags: unexpected line {line!r}") from e
            tags[peeled or target] = name

        logger.debug("Found %d tagged commit(s)", len(tags))
        return tags

    def get_head(self) -> str:
        """Return the full hash of the commit HEAD points at.

        Raises:
            HistoryWalkError: If HEAD does not resolve to a commit
        """
        try:
            return self._run(["rev-parse", "--verify", "HEAD^{commit}"]).strip()
        except GitCommandError as e:
            raise HistoryWalkError(f"couldn't resolve HEAD: {e}") from e

    def get_commit_graph(self) -> dict[str, Commit]:
        """Load every commit reachable from HEAD.

        The graph is loaded once and kept until :meth:`close`.

        Returns:
            Mapping of full commit hash to commit

        Raises:
            HistoryWalkError: If the history cannot be read
        """
        if self._graph is not None:
            return self._graph

        try:
            output = self._run(["log", "-z", f"--format={_LOG_FORMAT}", "HEAD"])
        except GitCommandError as e:
            raise HistoryWalkError(f"couldn't get commits: {e}") from e

        graph: dict[str, Commit] = {}
        for record in output.split("\0"):
            if not record:
                continue
            try:
                sha, parents, message = record.split(_FIELD_SEP, 2)
            except ValueError as e:
                raise HistoryWalkError(f"couldn't parse commit record {record[:40]!r}") from e
            graph[sha] = Commit(sha=sha, message=message, parents=tuple(parents.split()))

        logger.debug("Loaded %d commit(s) reachable from HEAD", len(graph))
        self._graph = graph
        return graph
