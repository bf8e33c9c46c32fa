"""Extract command trees from ``click`` commands and groups."""

from __future__ import annotations

import logging

import click

from .model import CommandNode, FlagSpec

LOGGER = logging.getLogger(__name__)

_PARAM_TYPE_TAGS = {
    click.BOOL: "bool",
    click.INT: "int",
    click.FLOAT: "float64",
    click.STRING: "string",
    click.UNPROCESSED: "string",
}


class KeyValueParamType(click.ParamType):
    """``KEY=VALUE`` option values; reported with the ``map`` tag when the
    option is repeatable."""

    name = "map"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        key, sep, item = str(value).partition("=")
        if not sep:
            self.fail(f"expected KEY=VALUE, got {value!r}", param, ctx)
        return key, item


KEY_VALUE = KeyValueParamType()


def _long_name(option: click.Option) -> str | None:
    for opt in option.opts:
        if opt.startswith("--"):
            return opt[2:]
    return None


def _type_tag(option: click.Option) -> str:
    if isinstance(option.type, KeyValueParamType):
        return "map" if option.multiple else "string"
    if option.multiple:
        return "list"
    if option.is_flag or option.count:
        return "int" if option.count else "bool"
    if option.type in _PARAM_TYPE_TAGS:
        return _PARAM_TYPE_TAGS[option.type]
    if isinstance(option.type, click.types.IntParamType):
        return "int"
    if isinstance(option.type, click.types.FloatParamType):
        return "float64"
    return option.type.name


def _usage(command: click.Command, ctx: click.Context) -> str:
    pieces = command.collect_usage_pieces(ctx)
    return " ".join([ctx.command_path, *pieces])


def command_tree_from_click(
    command: click.Command,
    name: str | None = None,
    parent: click.Context | None = None,
) -> CommandNode:
    """Convert a click command (recursing into groups) into a
    :class:`CommandNode`."""
    name = name or command.name or "cli"
    ctx = click.Context(command, info_name=name, parent=parent)

    flags: list[FlagSpec] = []
    for param in command.get_params(ctx):
        if not isinstance(param, click.Option) or param.name == "help":
            continue
        long_name = _long_name(param)
        if long_name is None:
            LOGGER.warning(f"{ctx.command_path}: skipping {param.opts} without a long option")
            continue
        flags.append(FlagSpec(name=long_name, type=_type_tag(param), help=param.help or ""))

    commands: list[CommandNode] = []
    if isinstance(command, click.Group):
        for sub_name in command.list_commands(ctx):
            sub = command.get_command(ctx, sub_name)
            if sub is None or sub.hidden:
                continue
            commands.append(command_tree_from_click(sub, sub_name, ctx))

    return CommandNode(
        name=name,
        usage=_usage(command, ctx),
        short=command.get_short_help_str(limit=200),
        flags=tuple(flags),
        commands=tuple(commands),
    )


__all__ = ["KEY_VALUE", "KeyValueParamType", "command_tree_from_click"]
