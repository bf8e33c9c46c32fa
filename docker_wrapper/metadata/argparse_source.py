"""Extract command trees from ``argparse`` parsers."""

from __future__ import annotations

import argparse
import logging
from argparse import (
    BooleanOptionalAction,
    _AppendAction,
    _AppendConstAction,
    _CountAction,
    _HelpAction,
    _StoreConstAction,
    _StoreFalseAction,
    _StoreTrueAction,
    _SubParsersAction,
    _VersionAction,
)

from .model import CommandNode, FlagSpec

LOGGER = logging.getLogger(__name__)

_TYPE_TAGS = {int: "int", float: "float64", str: "string", bool: "bool", complex: "complex128"}
_NO_VALUE_ACTIONS = (_VersionAction, _AppendConstAction)


class KeyValueAction(argparse.Action):
    """Collect repeated ``KEY=VALUE`` options into a dict.

    Flags declared with this action are reported with the ``map`` tag.
    """

    def __call__(self, parser, namespace, values, option_string=None):
        key, sep, value = str(values).partition("=")
        if not sep:
            parser.error(f"{option_string} expects KEY=VALUE, got {values!r}")
        items = dict(getattr(namespace, self.dest, None) or {})
        items[key] = value
        setattr(namespace, self.dest, items)


def _long_name(action: argparse.Action) -> str | None:
    for option in action.option_strings:
        if option.startswith("--"):
            return option[2:]
    return None


def _type_tag(action: argparse.Action) -> str:
    if isinstance(action, KeyValueAction):
        return "map"
    if isinstance(action, (_StoreTrueAction, _StoreFalseAction, BooleanOptionalAction)):
        return "bool"
    if isinstance(action, _StoreConstAction):
        return "bool"
    if isinstance(action, _CountAction):
        return "int"
    if isinstance(action, _AppendAction) or action.nargs in {"+", "*"}:
        return "list"
    if action.type is None:
        return "string"
    if action.type in _TYPE_TAGS:
        return _TYPE_TAGS[action.type]
    return getattr(action.type, "__name__", type(action.type).__name__)


def _usage(parser: argparse.ArgumentParser) -> str:
    usage = parser.format_usage().strip()
    if usage.startswith("usage:"):
        usage = usage[len("usage:") :].strip()
    return " ".join(usage.split())


def command_tree_from_argparse(
    parser: argparse.ArgumentParser,
    name: str | None = None,
    short: str | None = None,
) -> CommandNode:
    """Convert ``parser`` and its subparsers into a :class:`CommandNode`.

    Positional arguments are not flags and are skipped, as is ``--help``.
    Options that only have a short form cannot be rendered as ``--name``
    and are skipped with a warning, as are ``version`` and ``append_const``
    options, which take no value but are not switches either.
    """
    name = name or parser.prog.split()[-1]
    flags: list[FlagSpec] = []
    commands: list[CommandNode] = []

    for action in parser._actions:  # noqa: SLF001
        if isinstance(action, _HelpAction):
            continue
        if isinstance(action, _SubParsersAction):
            helps = {choice.dest: choice.help for choice in action._choices_actions}  # noqa: SLF001
            seen: set[int] = set()
            for sub_name, subparser in action.choices.items():
                # aliases map to the parser already seen under its name
                if id(subparser) in seen:
                    continue
                seen.add(id(subparser))
                commands.append(command_tree_from_argparse(subparser, sub_name, helps.get(sub_name)))
            continue
        if not action.option_strings:
            continue
        long_name = _long_name(action)
        if long_name is None:
            LOGGER.warning(f"{parser.prog}: skipping {action.option_strings} without a long option")
            continue
        if isinstance(action, _NO_VALUE_ACTIONS):
            LOGGER.warning(f"{parser.prog}: skipping --{long_name}, its action takes no value")
            continue
        flags.append(FlagSpec(name=long_name, type=_type_tag(action), help=action.help or ""))

    return CommandNode(
        name=name,
        usage=_usage(parser),
        short=short if short is not None else (parser.description or ""),
        flags=tuple(flags),
        commands=tuple(commands),
    )


__all__ = ["KeyValueAction", "command_tree_from_argparse"]
