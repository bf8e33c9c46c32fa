"""Runtime support for generated wrappers.

Generated option records are plain dataclasses whose fields are declared
with :func:`flag`, :func:`list_flag` or :func:`map_flag`. The field metadata
records the flag's long name and its rendering shape; :func:`render_options`
walks the fields in declaration order and turns every set value into
command-line arguments. Builders return a :class:`Command`, which only
describes the invocation until one of its ``run`` methods is called.
"""

from __future__ import annotations

import logging
import math
import shlex
import subprocess
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any
from collections.abc import Callable, Mapping, Sequence

LOGGER = logging.getLogger(__name__)

FLAG_METADATA_KEY = "flag"
SHAPE_METADATA_KEY = "shape"


class RenderShape(str, Enum):
    """How a field value becomes command-line arguments."""

    SINGLE = "single"
    LIST = "list"
    MAP = "map"


def flag(name: str, shape: RenderShape = RenderShape.SINGLE) -> Any:
    """Declare an optional field rendered as ``--name=value``."""
    return field(default=None, metadata={FLAG_METADATA_KEY: name, SHAPE_METADATA_KEY: shape})


def list_flag(name: str) -> Any:
    """Declare an optional field rendered as ``--name item`` per element."""
    return flag(name, RenderShape.LIST)


def map_flag(name: str) -> Any:
    """Declare an optional field rendered as ``--name key=value`` per
    entry."""
    return flag(name, RenderShape.MAP)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return repr(value)


def format_value(value: Any) -> str:
    """Canonical string form of a scalar flag value.

    Booleans are ``true``/``false``, floats use the shortest round-trip form
    (``+Inf``, ``-Inf`` and ``NaN`` for the special values) and complex
    numbers are written ``(re+imi)``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, complex):
        imag = _format_float(value.imag)
        if imag[0] not in "+-":
            imag = "+" + imag
        return f"({_format_float(value.real)}{imag}i)"
    return str(value)


def _render_single(name: str, value: Any) -> list[str]:
    return [f"--{name}={format_value(value)}"]


def _render_list(name: str, values: Sequence[Any]) -> list[str]:
    if isinstance(values, str):
        values = [values]
    cargs: list[str] = []
    for item in values:
        cargs.append(f"--{name}")
        cargs.append(item if isinstance(item, str) else format_value(item))
    return cargs


def _render_map(name: str, values: Mapping[str, Any]) -> list[str]:
    cargs: list[str] = []
    for key, item in values.items():
        cargs.append(f"--{name}")
        cargs.append(f"{key}={item if isinstance(item, str) else format_value(item)}")
    return cargs


_RENDERERS: dict[RenderShape, Callable[[str, Any], list[str]]] = {
    RenderShape.SINGLE: _render_single,
    RenderShape.LIST: _render_list,
    RenderShape.MAP: _render_map,
}


def render_flag(name: str, shape: RenderShape, value: Any) -> list[str]:
    """Render one flag value; ``None`` means unset and renders nothing."""
    if value is None:
        return []
    return _RENDERERS[RenderShape(shape)](name, value)


def render_options(opt: Any) -> list[str]:
    """Render every set field of an option record in declaration order."""
    if opt is None:
        return []
    if not is_dataclass(opt) or isinstance(opt, type):
        raise TypeError(f"expected an option record instance, got {type(opt).__name__}")

    cargs: list[str] = []
    for item in fields(opt):
        name = item.metadata.get(FLAG_METADATA_KEY)
        if name is None:
            continue
        cargs.extend(render_flag(name, item.metadata[SHAPE_METADATA_KEY], getattr(opt, item.name)))
    return cargs


@dataclass(frozen=True)
class Command:
    """An external program invocation that has not been started."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)

    def completed(self, **kwargs: Any) -> subprocess.CompletedProcess:
        """Run synchronously with ``subprocess.run`` and return the result."""
        LOGGER.debug(f"Running: {self}")
        kwargs.setdefault("check", False)
        return subprocess.run(self.argv, **kwargs)

    def combined_output(self) -> str:
        """Run synchronously and return stdout and stderr interleaved.

        Raises ``subprocess.CalledProcessError`` (carrying the output) when
        the program exits with a non-zero status.
        """
        result = self.completed(stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
        if result.returncode != 0:
            raise subprocess.CalledProcessError(result.returncode, self.argv, output=result.stdout)
        return result.stdout

    def run(self) -> bool:
        """Run synchronously and report whether the program succeeded."""
        return self.completed().returncode == 0


def build_command(
    program: str,
    prefix: Sequence[str],
    opt: Any = None,
    args: Sequence[str] = (),
) -> Command:
    """Assemble ``prefix``, rendered options and positionals into a
    :class:`Command` for ``program``."""
    if isinstance(args, str):
        args = [args]
    return Command(program, (*prefix, *render_options(opt), *args))


__all__ = [
    "Command",
    "FLAG_METADATA_KEY",
    "RenderShape",
    "SHAPE_METADATA_KEY",
    "build_command",
    "flag",
    "format_value",
    "list_flag",
    "map_flag",
    "render_flag",
    "render_options",
]
