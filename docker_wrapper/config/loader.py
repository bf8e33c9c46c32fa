"""Helpers for reading generator configuration into typed dataclasses."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from collections.abc import Iterable, Mapping

from compoconf import parse_config
from hydra import compose, initialize_config_dir
from omegaconf import OmegaConf

from .resolvers import register_default_resolvers
from .schema import GeneratorConfig

LOGGER = logging.getLogger(__name__)


class ConfigLoaderError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def _parse(data: Any, source: str) -> GeneratorConfig:
    if not isinstance(data, Mapping):
        raise ConfigLoaderError(f"Configuration root must be a mapping: {source}")
    if not data.get("metadata"):
        raise ConfigLoaderError(f"{source}: `metadata` (command tree file) is required")
    try:
        return parse_config(GeneratorConfig, dict(data))
    except Exception as exc:  # pragma: no cover - compoconf raises rich errors
        raise ConfigLoaderError(f"Unable to parse config {source}: {exc}") from exc


def load_config(path: str | Path, overrides: Iterable[str] | None = None) -> GeneratorConfig:
    """Load a generator config from a YAML file, applying ``key=value``
    overrides."""

    path = Path(path)
    if not path.exists():
        raise ConfigLoaderError(f"Configuration file not found: {path}")

    register_default_resolvers()
    cfg = OmegaConf.load(path)
    for override in overrides or []:
        if "=" not in override:
            raise ConfigLoaderError(f"Invalid override {override!r}, expected KEY=VALUE")
        key, value = override.split("=", 1)
        OmegaConf.update(cfg, key, value, merge=True)

    data = OmegaConf.to_container(cfg, resolve=True)
    return _parse(data, str(path))


def load_hydra_config(
    config_name: str,
    config_dir: str | Path,
    overrides: Iterable[str] | None = None,
) -> GeneratorConfig:
    LOGGER.info(f"Loading Hydra config: {config_name} from {config_dir}")
    register_default_resolvers()

    overrides = list(overrides or [])
    if overrides:
        LOGGER.debug(f"Applying {len(overrides)} overrides")

    config_dir = Path(config_dir).resolve()
    if not config_dir.exists():
        raise ConfigLoaderError(f"Hydra config directory not found: {config_dir}")

    with initialize_config_dir(version_base=None, config_dir=str(config_dir)):
        cfg = compose(config_name=config_name, overrides=overrides)

    data = OmegaConf.to_container(cfg, resolve=True)
    return _parse(data, f"Hydra config {config_name}")


def load_config_reference(
    ref: str | Path,
    config_dir: str | Path,
    overrides: Iterable[str] | None = None,
) -> GeneratorConfig:
    """Load ``ref`` as a file when it exists, else compose it with Hydra from
    ``config_dir``."""
    path = Path(ref)
    if path.is_file():
        return load_config(path, overrides)
    return load_hydra_config(str(ref), config_dir, overrides)


__all__ = [
    "ConfigLoaderError",
    "load_config",
    "load_config_reference",
    "load_hydra_config",
]
