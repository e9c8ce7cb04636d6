"""Loading configuration from pyproject.toml.

Configuration lives in an optional ``[tool.ccv]`` table::

    [tool.ccv.version]
    initial_version = "1.0.0"
    initial_bump = "major"
    output_prefix = ""

Without a pyproject.toml or without the table, defaults apply.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ccv.config.models import CcvConfig
from ccv.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_TABLE = "ccv"


def find_pyproject_toml(start: Path | None = None, stop: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or one of its parents.

    Args:
        start: Directory to search from (defaults to the current directory)
        stop: Last directory to search; parents of it are not searched

    Returns:
        Path to the pyproject.toml found

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()
    boundary = stop.resolve() if stop is not None else None

    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
        if directory == boundary:
            break

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_ccv_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.ccv]`` table, or an empty dict if absent."""
    return pyproject.get("tool", {}).get(CONFIG_TABLE, {})


def load_config(path: Path | None = None, stop: Path | None = None) -> CcvConfig:
    """Load configuration for the project at ``path``.

    Args:
        path: Directory to search for pyproject.toml from
        stop: Last directory to search, usually the repository root

    Returns:
        Validated configuration; defaults if nothing is configured

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path, stop)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
        return CcvConfig()

    data = extract_ccv_config(load_pyproject_toml(pyproject_path))
    try:
        config = CcvConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid [tool.{CONFIG_TABLE}] in {pyproject_path}:\n{e}"
        ) from e

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
