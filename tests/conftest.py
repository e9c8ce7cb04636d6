"""Shared fixtures for ccv tests.

Repositories are real git repositories created in ``tmp_path`` with the
``git`` executable.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


class GitRepoBuilder:
    """Small helper for building commit histories in tests."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.git("init", "-q")
        self.git("symbolic-ref", "HEAD", "refs/heads/main")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            [
                "git",
                "-c",
                "user.name=Test",
                "-c",
                "user.email=test@test.com",
                "-c",
                "commit.gpgsign=false",
                "-c",
                "tag.gpgsign=false",
                *args,
            ],
            cwd=self.path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, message: str) -> str:
        """Create an empty commit and return its hash."""
        self.git("commit", "-q", "--allow-empty", "-m", message)
        return self.head()

    def head(self) -> str:
        return self.git("rev-parse", "HEAD")

    def tag(self, name: str, annotated: bool = False) -> None:
        if annotated:
            self.git("tag", "-a", name, "-m", f"release {name}")
        else:
            self.git("tag", name)

    def branch(self, name: str, start: str | None = None) -> None:
        """Create a branch and switch to it."""
        if start is None:
            self.git("checkout", "-q", "-b", name)
        else:
            self.git("checkout", "-q", "-b", name, start)

    def checkout(self, ref: str) -> None:
        self.git("checkout", "-q", ref)

    def merge(self, ref: str, message: str | None = None) -> str:
        """Merge ``ref`` into the current branch with a merge commit."""
        self.git("merge", "-q", "--no-ff", "-m", message or f"Merge branch '{ref}'", ref)
        return self.head()


@pytest.fixture(autouse=True)
def _isolate_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep git from finding repositories or config outside the test."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepoBuilder:
    """An empty git repository on branch main."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    return GitRepoBuilder(repo_path)


@pytest.fixture
def tagged_repo(git_repo: GitRepoBuilder) -> GitRepoBuilder:
    """A repository whose HEAD is tagged v1.2.3."""
    git_repo.commit("chore: initial commit")
    git_repo.commit("feat: first feature")
    git_repo.tag("v1.2.3")
    return git_repo


@pytest.fixture
def branch_before_tag_repo(git_repo: GitRepoBuilder) -> GitRepoBuilder:
    """A branch split off before v1.0.0 was tagged on main, then merged.

    ::

        A (chore) ── B (fix, v1.0.0)        main
         \\             \\
          C (feat) ──── M (merge)           feature, HEAD

    Only the second parent line of M reaches the tag.
    """
    root = git_repo.commit("chore: initial commit")
    git_repo.commit("fix: tagged fix")
    git_repo.tag("v1.0.0")
    git_repo.branch("feature", root)
    git_repo.commit("feat: branch feature")
    git_repo.merge("main")
    return git_repo
