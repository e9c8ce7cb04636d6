"""Configuration management for ccv."""

from __future__ import annotations

from ccv.config.loader import load_config
from ccv.config.models import CcvConfig, VersionConfig

__all__ = [
    "CcvConfig",
    "VersionConfig",
    "load_config",
]
