"""Read and write command trees as YAML/JSON documents."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any
from collections.abc import Mapping

import yaml

from .model import CommandNode, FlagSpec

LOGGER = logging.getLogger(__name__)


class MetadataLoaderError(RuntimeError):
    """Raised when a command tree document cannot be read."""


def _as_text(value: Any, where: str, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise MetadataLoaderError(f"{where}: `{key}` must be a scalar, got {type(value).__name__}")
    # YAML 1.1 reads unquoted yes/no/on/off as booleans
    if isinstance(value, bool):
        raise MetadataLoaderError(f"{where}: `{key}` was read as {value}; quote the text")
    return str(value)


def _flag_from_dict(data: Any, where: str) -> FlagSpec:
    if not isinstance(data, Mapping):
        raise MetadataLoaderError(f"{where}: flag entries must be mappings")
    name = _as_text(data.get("name"), where, "name")
    if not name:
        raise MetadataLoaderError(f"{where}: flag entry without a name")
    return FlagSpec(
        name=name,
        type=_as_text(data.get("type"), where, "type") or "string",
        help=_as_text(data.get("help"), where, "help"),
    )


def command_tree_from_dict(data: Mapping[str, Any], parent: str = "") -> CommandNode:
    """Build a :class:`CommandNode` tree from its mapping form."""
    if not isinstance(data, Mapping):
        raise MetadataLoaderError(f"{parent or '<root>'}: command entries must be mappings")
    name = _as_text(data.get("name"), parent or "<root>", "name")
    if not name:
        raise MetadataLoaderError(f"{parent or '<root>'}: command entry without a name")
    where = f"{parent} {name}".strip()

    flags = data.get("flags") or []
    commands = data.get("commands") or []
    if not isinstance(flags, list) or not isinstance(commands, list):
        raise MetadataLoaderError(f"{where}: `flags` and `commands` must be lists")

    return CommandNode(
        name=name,
        usage=_as_text(data.get("usage"), where, "usage"),
        short=_as_text(data.get("short"), where, "short"),
        flags=tuple(_flag_from_dict(entry, where) for entry in flags),
        commands=tuple(command_tree_from_dict(entry, where) for entry in commands),
    )


def command_tree_to_dict(node: CommandNode) -> dict[str, Any]:
    data: dict[str, Any] = {"name": node.name, "usage": node.usage, "short": node.short}
    if node.flags:
        data["flags"] = [{"name": flag.name, "type": flag.type, "help": flag.help} for flag in node.flags]
    if node.commands:
        data["commands"] = [command_tree_to_dict(child) for child in node.commands]
    return data


def load_command_tree(path: str | Path) -> CommandNode:
    """Load a command tree from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise MetadataLoaderError(f"Command tree file not found: {path}")

    # plain YAML keeps ${...} in help texts literal
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise MetadataLoaderError(f"Unable to parse command tree {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise MetadataLoaderError(f"Command tree root must be a mapping: {path}")

    root = command_tree_from_dict(data)
    LOGGER.debug(f"Loaded command tree {root.name!r} from {path}")
    return root


def load_packaged_tree(filename: str) -> CommandNode:
    """Load a command tree shipped in ``docker_wrapper/data``."""
    resource = resources.files("docker_wrapper") / "data" / filename
    with resources.as_file(resource) as path:
        return load_command_tree(path)


def dump_command_tree(node: CommandNode) -> str:
    """Serialise a command tree to YAML."""
    return yaml.safe_dump(command_tree_to_dict(node), sort_keys=False, allow_unicode=True)


__all__ = [
    "MetadataLoaderError",
    "command_tree_from_dict",
    "command_tree_to_dict",
    "dump_command_tree",
    "load_command_tree",
    "load_packaged_tree",
]
