"""Version control access for ccv."""

from __future__ import annotations

from ccv.vcs.git import Commit, GitRepository

__all__ = ["Commit", "GitRepository"]
