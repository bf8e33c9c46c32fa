"""Resolve ``module:attribute`` references to command trees."""

from __future__ import annotations

import argparse
from importlib import import_module
from typing import Any

import click

from .argparse_source import command_tree_from_argparse
from .click_source import command_tree_from_click
from .loader import MetadataLoaderError
from .model import CommandNode


def command_tree_from_object(obj: Any, name: str | None = None) -> CommandNode:
    """Convert an argparse parser or a click command into a command tree.

    Zero-argument callables (parser factories) are called first.
    """
    if callable(obj) and not isinstance(obj, (argparse.ArgumentParser, click.Command)):
        obj = obj()
    if isinstance(obj, argparse.ArgumentParser):
        return command_tree_from_argparse(obj, name)
    if isinstance(obj, click.Command):
        return command_tree_from_click(obj, name)
    raise MetadataLoaderError(f"Cannot extract a command tree from {type(obj).__name__}")


def import_command_tree(target: str, name: str | None = None) -> CommandNode:
    """Import ``module:attribute`` and convert it with
    :func:`command_tree_from_object`."""
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise MetadataLoaderError(f"Invalid target {target!r}, expected MODULE:ATTRIBUTE")
    try:
        module = import_module(module_name)
    except ImportError as exc:
        raise MetadataLoaderError(f"Cannot import {module_name!r}: {exc}") from exc

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise MetadataLoaderError(f"{module_name!r} has no attribute {attribute!r}") from exc
    return command_tree_from_object(obj, name)


__all__ = ["command_tree_from_object", "import_command_tree"]
