"""Centralized runtime configuration for tempconv.

This module exposes :func:`get_settings` returning the defaults used by the
command line: the literal substituted for an empty prompt answer and where the
structured event log goes. Values can be customized via environment variables
or by pointing ``TEMPCONV_CONFIG_FILE`` to a TOML/YAML document with a
``[cli]`` section.
"""
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["DEFAULT_INPUT", "Settings", "get_settings", "reset_settings"]

DEFAULT_INPUT = "36.9C"

_CONFIG_CACHE: Optional["Settings"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class Settings:
    """Resolved command line settings."""

    default_input: str = DEFAULT_INPUT
    log_file: Optional[Path] = None
    log_level: int = logging.INFO
    config_file: Optional[Path] = None

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as plain values (useful for logging)."""

        return {
            "default_input": self.default_input,
            "log_file": str(self.log_file) if self.log_file is not None else None,
            "log_level": logging.getLevelName(self.log_level),
            "config_file": str(self.config_file) if self.config_file is not None else None,
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute() and base is not None:
        candidate = base / candidate
    return candidate.resolve()


def _parse_level(value: Any) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{value}'")
    return level


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _build_settings(config_file: Optional[Path]) -> Settings:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=Path.cwd())
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    cli_section = _coalesce_mapping(config_data.get("cli"))

    env = os.environ

    default_input = env.get("TEMPCONV_DEFAULT_INPUT") or cli_section.get("default_input") or DEFAULT_INPUT

    log_file = _normalize_path(
        env.get("TEMPCONV_LOG_FILE") or cli_section.get("log_file"),
        base=config_dir or Path.cwd(),
    )

    log_level = _parse_level(env.get("TEMPCONV_LOG_LEVEL") or cli_section.get("log_level") or logging.INFO)

    return Settings(
        default_input=str(default_input).strip(),
        log_file=log_file,
        log_level=log_level,
        config_file=config_file,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_settings(Path(config_file).expanduser())

    env_path = os.getenv("TEMPCONV_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_settings(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
