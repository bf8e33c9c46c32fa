"""Typed Python wrappers for command line programs, generated from their
flag metadata."""

from .codegen import GenerationError, generate_module, plan_tree
from .dynamic import build_wrappers
from .metadata import CommandNode, FlagSpec, load_command_tree
from .runtime import Command, RenderShape, build_command

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandNode",
    "FlagSpec",
    "GenerationError",
    "RenderShape",
    "build_command",
    "build_wrappers",
    "generate_module",
    "load_command_tree",
    "plan_tree",
]
