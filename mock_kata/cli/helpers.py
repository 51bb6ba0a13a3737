"""Helper functions shared by the CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ..config import ConfigLoader

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import KataConfig


def load_config(config_file: Path | None) -> KataConfig:
    """Load configuration, reporting invalid values as a usage error.

    Environment values are parsed before any config file is read, so a
    malformed ``MOCK_KATA_MAX_AGE_MONTHS`` surfaces here as ``ValueError``.
    """
    try:
        return ConfigLoader.load(config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
