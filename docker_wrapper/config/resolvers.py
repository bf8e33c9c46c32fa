"""OmegaConf resolvers available in generator configs."""

from __future__ import annotations

from importlib import resources

from omegaconf import OmegaConf


_REGISTRATION_SENTINEL = {"registered": False}


def _data_path(filename: str) -> str:
    """Path of a data file shipped in ``docker_wrapper/data``."""
    return str(resources.files("docker_wrapper") / "data" / filename)


def register_default_resolvers(force: bool = False) -> None:
    """Register the resolvers if they have not already been registered."""

    if _REGISTRATION_SENTINEL["registered"] and not force:
        return

    OmegaConf.register_new_resolver("dw.data", _data_path, replace=True)

    _REGISTRATION_SENTINEL["registered"] = True


__all__ = ["register_default_resolvers"]
