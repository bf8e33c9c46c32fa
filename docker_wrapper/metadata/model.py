"""Command tree data model consumed by the wrapper generator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlagSpec:
    """One declared flag of a command.

    Attributes:
        name: Long flag name in kebab-case, without the leading ``--``.
        type: Value-type tag as reported by the flag library (``bool``,
            ``int64``, ``list``, ``map``, ...).
        help: Help text, copied verbatim into generated comments.
    """

    name: str
    type: str = "string"
    help: str = ""


@dataclass(frozen=True)
class CommandNode:
    """A named point in a command tree."""

    name: str
    usage: str = ""
    short: str = ""
    flags: tuple[FlagSpec, ...] = field(default_factory=tuple)
    commands: tuple[CommandNode, ...] = field(default_factory=tuple)

    def find(self, *path: str) -> CommandNode:
        """Return the descendant reached by following ``path`` from this
        node."""
        node = self
        for name in path:
            for child in node.commands:
                if child.name == name:
                    node = child
                    break
            else:
                raise KeyError(f"{' '.join((self.name, *path))}: no command named {name!r}")
        return node


__all__ = ["CommandNode", "FlagSpec"]
