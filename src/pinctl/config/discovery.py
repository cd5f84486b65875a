"""Locate and read ``pinctl.toml``.

Resolution order: the ``--config`` flag, then ``PINCTL_CONFIG``, then a
walk up from the working directory (the way git finds ``.git/``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from pinctl.config.models import PinConfig

CONFIG_FILENAME = "pinctl.toml"
CONFIG_ENV_VAR = "PINCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for pinctl.toml.

    ``PINCTL_CONFIG`` wins when set; a dangling value means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None, start: Path | None = None) -> Path | None:
    """Pick the config file for this run.

    An explicit ``--config`` path must exist; discovery failing is not an
    error and yields None.
    """
    if explicit is None:
        return find_config(start)
    path = Path(explicit)
    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise click.ClickException(msg)
    return path


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML and check its ``[output]``/``[pieces]`` tables.

    Returns the raw table; top-level flag keys such as ``quiet`` pass
    through untouched.  Malformed files are reported as CLI errors.
    """
    try:
        table = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
    try:
        PinConfig.model_validate(table)
    except ValidationError as exc:
        msg = f"Invalid config in {path}: {exc}"
        raise click.ClickException(msg) from exc
    return table
