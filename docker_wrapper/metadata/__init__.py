from .argparse_source import KeyValueAction, command_tree_from_argparse
from .click_source import KEY_VALUE, KeyValueParamType, command_tree_from_click
from .introspect import command_tree_from_object, import_command_tree
from .loader import (
    MetadataLoaderError,
    command_tree_from_dict,
    command_tree_to_dict,
    dump_command_tree,
    load_command_tree,
    load_packaged_tree,
)
from .model import CommandNode, FlagSpec

__all__ = [
    "CommandNode",
    "FlagSpec",
    "KEY_VALUE",
    "KeyValueAction",
    "KeyValueParamType",
    "MetadataLoaderError",
    "command_tree_from_argparse",
    "command_tree_from_click",
    "command_tree_from_dict",
    "command_tree_from_object",
    "command_tree_to_dict",
    "dump_command_tree",
    "import_command_tree",
    "load_command_tree",
    "load_packaged_tree",
]
