"""Identifier rules for generated option records and builders."""

from __future__ import annotations

import keyword
import re
from collections.abc import Iterable, Sequence

OPTION_SUFFIX = "Option"
BUILDER_SUFFIX = "Cmd"

_INVALID_IDENTIFIER_CHARS = re.compile(r"\W")
# class bodies of generated records call these helpers by name
_RESERVED_FIELD_NAMES = frozenset({"flag", "list_flag", "map_flag"})


class GenerationError(ValueError):
    """Raised when a command tree cannot be turned into valid Python."""


def to_pascal(segments: Iterable[str]) -> str:
    """Uppercase the first character of each segment and concatenate.

    The remainder of every segment is kept as declared, so ``["ls",
    "tlsverify"]`` becomes ``"LsTlsverify"``. Empty segments contribute
    nothing.
    """
    return "".join(segment[0].upper() + segment[1:] for segment in segments if segment)


def base_name(path: Sequence[str]) -> str:
    """Identifier shared by a command's option record and builder.

    Every path element is split on ``-`` before PascalCasing, e.g.
    ``("docker", "container", "run")`` -> ``"DockerContainerRun"`` and
    ``("docker", "plugin", "set-default")`` -> ``"DockerPluginSetDefault"``.
    """
    segments: list[str] = []
    for element in path:
        segments.extend(element.split("-"))
    name = to_pascal(segments)
    if not name.isidentifier():
        raise GenerationError(f"{' '.join(path)}: cannot derive an identifier (got {name!r})")
    return name


def option_class_name(path: Sequence[str]) -> str:
    return base_name(path) + OPTION_SUFFIX


def builder_name(path: Sequence[str]) -> str:
    return base_name(path) + BUILDER_SUFFIX


def field_name(flag_name: str) -> str:
    """Python attribute name for a flag, e.g. ``no-cache`` -> ``no_cache``."""
    name = _INVALID_IDENTIFIER_CHARS.sub("_", flag_name.replace("-", "_"))
    if not name:
        raise GenerationError("empty flag name")
    if name[0].isdigit():
        name = "flag_" + name
    if keyword.iskeyword(name) or name in _RESERVED_FIELD_NAMES:
        name += "_"
    return name


__all__ = [
    "BUILDER_SUFFIX",
    "GenerationError",
    "OPTION_SUFFIX",
    "base_name",
    "builder_name",
    "field_name",
    "option_class_name",
    "to_pascal",
]
