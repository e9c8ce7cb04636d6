"""Command line interface for ccv."""

from __future__ import annotations

from ccv.cli.main import app

__all__ = ["app"]
