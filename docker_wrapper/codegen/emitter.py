"""Render planned commands as a Python module."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..metadata.model import CommandNode
from .naming import GenerationError
from .traversal import NodePlan, plan_tree

LOGGER = logging.getLogger(__name__)

DEFAULT_RUNTIME_MODULE = "docker_wrapper.runtime"
RULE = "-" * 30
MAX_LINE = 88


def _literal(value: str) -> str:
    return json.dumps(value)


def _comment(text: str, indent: str = "") -> list[str]:
    return [f"{indent}# {line}".rstrip() for line in text.splitlines()]


def _docstring(text: str) -> str:
    return '"""' + text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"') + '"""'


def _header_block(plan: NodePlan) -> list[str]:
    lines = [f"# {plan.builder_name} is wrapper of '{plan.title}'", f"# {RULE}"]
    lines.extend(_comment(plan.node.usage))
    lines.extend(_comment(plan.node.short))
    lines.append(f"# {RULE}")
    return lines


def _option_class(plan: NodePlan) -> list[str]:
    lines = ["@dataclass(kw_only=True)", f"class {plan.option_name}:"]
    lines.append(f"    {_docstring(f'Options of {plan.title!r}.')}")
    for item in plan.fields:
        lines.append("")
        lines.extend(_comment(item.flag.help, indent="    "))
        lines.append(f"    {item.attr}: {item.annotation} = {item.helper}({_literal(item.flag.name)})")
    return lines


def _builder(plan: NodePlan) -> list[str]:
    params = []
    if plan.option_name:
        params.append(f"opt: {plan.option_name} | None = None")
    params.append("args: Sequence[str] = ()")

    signature = f"def {plan.builder_name}({', '.join(params)}) -> Command:"
    if len(signature) > MAX_LINE:
        lines = [f"def {plan.builder_name}(", f"    {', '.join(params)}", ") -> Command:"]
    else:
        lines = [signature]

    prefix = ", ".join(_literal(part) for part in plan.prefix)
    if len(plan.prefix) == 1:
        prefix += ","
    opt = "opt" if plan.option_name else "None"
    lines.append(f"    {_docstring(f'Build the {plan.title!r} invocation.')}")
    lines.append(f"    return build_command({_literal(plan.program)}, ({prefix}), {opt}, args)")
    return lines


def render_plans(
    plans: list[NodePlan],
    *,
    runtime_module: str = DEFAULT_RUNTIME_MODULE,
    doc: str | None = None,
) -> str:
    """Render already planned commands into module source text."""
    if not plans:
        raise GenerationError("nothing to generate: every command was excluded")
    root = plans[0]
    doc = doc or f"Wrappers of the '{root.program}' command line (auto-generated)."

    helpers = sorted({item.helper for plan in plans for item in plan.fields})
    runtime_names = ", ".join(["Command", "build_command", *helpers])

    lines = [
        _docstring(doc),
        "",
        "from __future__ import annotations",
        "",
        "from collections.abc import Sequence",
    ]
    if helpers:
        lines.append("from dataclasses import dataclass")
    lines.extend(["", f"from {runtime_module} import {runtime_names}"])

    exported: list[str] = []
    for plan in plans:
        lines.extend(["", ""])
        lines.extend(_header_block(plan))
        if plan.option_name:
            lines.extend(_option_class(plan))
            lines.extend(["", ""])
            exported.append(plan.option_name)
        lines.extend(_builder(plan))
        exported.append(plan.builder_name)

    lines.extend(["", "", "__all__ = ["])
    lines.extend(f"    {_literal(name)}," for name in exported)
    lines.append("]")
    return "\n".join(lines) + "\n"


def generate_module(
    root: CommandNode,
    *,
    runtime_module: str = DEFAULT_RUNTIME_MODULE,
    doc: str | None = None,
    exclude: Iterable[str] = (),
) -> str:
    """Generate the wrapper module for every command of ``root``.

    The output depends only on the arguments, so regenerating from the same
    tree yields byte-identical text.
    """
    plans = plan_tree(root, exclude)
    source = render_plans(plans, runtime_module=runtime_module, doc=doc)
    LOGGER.info(
        f"Generated {len(plans)} wrappers "
        f"({sum(1 for plan in plans if plan.option_name)} option records) for {root.name!r}"
    )
    return source


__all__ = ["DEFAULT_RUNTIME_MODULE", "generate_module", "render_plans"]
