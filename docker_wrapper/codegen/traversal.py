"""Depth-first traversal of command trees into per-command plans."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from collections.abc import Iterable, Iterator

from ..metadata.model import CommandNode
from .naming import BUILDER_SUFFIX, OPTION_SUFFIX, GenerationError, base_name
from .types import FieldPlan, plan_field

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodePlan:
    """Everything needed to emit the wrapper of one command."""

    node: CommandNode
    path: tuple[str, ...]
    base_name: str
    fields: tuple[FieldPlan, ...]

    @property
    def program(self) -> str:
        return self.path[0]

    @property
    def prefix(self) -> tuple[str, ...]:
        """Literal arguments naming the subcommand (the program excluded)."""
        return self.path[1:]

    @property
    def option_name(self) -> str | None:
        return self.base_name + OPTION_SUFFIX if self.fields else None

    @property
    def builder_name(self) -> str:
        return self.base_name + BUILDER_SUFFIX

    @property
    def title(self) -> str:
        return " ".join(self.path)


def walk(
    root: CommandNode, exclude: Iterable[str] = ()
) -> Iterator[tuple[CommandNode, tuple[str, ...]]]:
    """Yield ``(node, path)`` for every command, root first, each child's
    subtree before the next sibling.

    ``exclude`` holds space-joined command paths (``"docker plugin"``) whose
    subtrees are skipped.
    """
    excluded = {" ".join(entry.split()) for entry in exclude}
    stack: list[tuple[CommandNode, tuple[str, ...], frozenset[int]]] = [(root, (root.name,), frozenset())]
    while stack:
        node, path, ancestors = stack.pop()
        if id(node) in ancestors:
            raise GenerationError(f"{' '.join(path)}: command appears inside its own subtree")
        if " ".join(path) in excluded:
            LOGGER.debug(f"Skipping excluded command {' '.join(path)!r}")
            continue
        yield node, path
        inner = ancestors | {id(node)}
        for child in reversed(node.commands):
            stack.append((child, (*path, child.name), inner))


def plan_node(node: CommandNode, path: tuple[str, ...]) -> NodePlan:
    """Plan one command, failing on flags that would collide."""
    title = " ".join(path)
    seen_flags: set[str] = set()
    seen_attrs: dict[str, str] = {}
    fields: list[FieldPlan] = []
    for flag in node.flags:
        if flag.name in seen_flags:
            raise GenerationError(f"{title}: duplicate flag --{flag.name}")
        seen_flags.add(flag.name)
        try:
            plan = plan_field(flag)
        except GenerationError as exc:
            raise GenerationError(f"{title}: {exc}") from exc
        if plan.attr in seen_attrs:
            raise GenerationError(
                f"{title}: flags --{seen_attrs[plan.attr]} and --{flag.name} "
                f"both map to field {plan.attr!r}"
            )
        seen_attrs[plan.attr] = flag.name
        fields.append(plan)
    return NodePlan(node=node, path=path, base_name=base_name(path), fields=tuple(fields))


def plan_tree(root: CommandNode, exclude: Iterable[str] = ()) -> list[NodePlan]:
    """Plan every command of ``root`` in traversal order."""
    plans: list[NodePlan] = []
    owners: dict[str, str] = {}
    for node, path in walk(root, exclude):
        plan = plan_node(node, path)
        if plan.base_name in owners:
            raise GenerationError(
                f"{plan.title}: identifier {plan.base_name!r} already used by {owners[plan.base_name]!r}"
            )
        owners[plan.base_name] = plan.title
        plans.append(plan)
    LOGGER.debug(f"Planned {len(plans)} commands from {root.name!r}")
    return plans


__all__ = ["NodePlan", "plan_node", "plan_tree", "walk"]
