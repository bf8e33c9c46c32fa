"""Build option records and builders at runtime instead of generating
source.

The classes and functions produced here follow the same naming, field and
rendering rules as :mod:`docker_wrapper.codegen.emitter`; a module can expose
them by updating its globals with :func:`build_wrappers`.
"""

from __future__ import annotations

import logging
from dataclasses import make_dataclass
from typing import Any
from collections.abc import Callable, Iterable, Sequence

from .codegen.traversal import NodePlan, plan_tree
from .metadata.model import CommandNode
from .runtime import Command, build_command, flag

LOGGER = logging.getLogger(__name__)


def make_option_class(plan: NodePlan, module: str | None = None) -> type | None:
    """Create the option dataclass of ``plan`` (``None`` without flags)."""
    if not plan.option_name:
        return None
    cls = make_dataclass(
        plan.option_name,
        [(item.attr, item.python_type, flag(item.flag.name, item.shape)) for item in plan.fields],
        kw_only=True,
    )
    cls.__doc__ = f"Options of {plan.title!r}."
    if module is not None:
        cls.__module__ = module
    return cls


def make_builder(
    plan: NodePlan, option_cls: type | None = None, module: str | None = None
) -> Callable[..., Command]:
    """Create the builder function of ``plan``."""
    program, prefix = plan.program, plan.prefix

    if option_cls is None:

        def builder(args: Sequence[str] = ()) -> Command:
            return build_command(program, prefix, None, args)

        builder.__annotations__ = {"args": Sequence[str], "return": Command}
    else:

        def builder(opt: Any = None, args: Sequence[str] = ()) -> Command:
            return build_command(program, prefix, opt, args)

        builder.__annotations__ = {
            "opt": option_cls | None,
            "args": Sequence[str],
            "return": Command,
        }

    builder.__name__ = builder.__qualname__ = plan.builder_name
    builder.__doc__ = f"Build the {plan.title!r} invocation."
    if module is not None:
        builder.__module__ = module
    return builder


def build_wrappers(
    root: CommandNode,
    *,
    module: str | None = None,
    exclude: Iterable[str] = (),
) -> dict[str, Any]:
    """Return ``{name: object}`` for every option record and builder of
    ``root``, in traversal order."""
    namespace: dict[str, Any] = {}
    for plan in plan_tree(root, exclude):
        option_cls = make_option_class(plan, module)
        if option_cls is not None:
            namespace[plan.option_name] = option_cls
        namespace[plan.builder_name] = make_builder(plan, option_cls, module)
    LOGGER.debug(f"Built {len(namespace)} wrapper objects for {root.name!r}")
    return namespace


__all__ = ["build_wrappers", "make_builder", "make_option_class"]
