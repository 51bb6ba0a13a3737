from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults, EnvVars


@dataclass(frozen=True, slots=True)
class KataConfig:
    accepted_formats: tuple[str, ...] = Defaults.ACCEPTED_FORMATS
    max_age_months: int = Defaults.MAX_AGE_MONTHS
    catalog_path: Path = field(default_factory=lambda: Path(Defaults.CATALOG_FILE))

    def __post_init__(self) -> None:
        if not self.accepted_formats:
            raise ValueError("accepted_formats must not be empty")
        if self.max_age_months < Constraints.MIN_AGE_MONTHS:
            raise ValueError(
                f"max_age_months must be positive, got {self.max_age_months}"
            )

    @classmethod
    def from_env(cls) -> KataConfig:
        raw_formats = os.getenv(EnvVars.ACCEPTED_FORMATS)
        accepted_formats = (
            _split_formats(raw_formats)
            if raw_formats is not None
            else Defaults.ACCEPTED_FORMATS
        )
        return cls(
            accepted_formats=accepted_formats,
            max_age_months=int(
                os.getenv(EnvVars.MAX_AGE_MONTHS, str(Defaults.MAX_AGE_MONTHS))
            ),
            catalog_path=Path(os.getenv(EnvVars.CATALOG, Defaults.CATALOG_FILE)),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> KataConfig:
        config = KataConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: KataConfig) -> KataConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        sender_section = _get_table(data, "file_sender")
        cache_section = _get_table(data, "cache")
        accepted_formats = base_config.accepted_formats
        if (value := sender_section.get("accepted_formats")) is not None:
            accepted_formats = _coerce_formats(
                value, key="file_sender.accepted_formats"
            )
        max_age_months = base_config.max_age_months
        if (value := sender_section.get("max_age_months")) is not None:
            max_age_months = _coerce_int(value, key="file_sender.max_age_months")
        catalog_path = base_config.catalog_path
        if value := cache_section.get("catalog"):
            catalog_path = Path(str(value))
        return KataConfig(
            accepted_formats=accepted_formats,
            max_age_months=max_age_months,
            catalog_path=catalog_path,
        )


def _split_formats(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_formats(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_formats(value)
    if isinstance(value, list):
        return tuple(str(item) for item in cast("list[object]", value))
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
