"""Configuration dataclasses for the wrapper generator."""

from __future__ import annotations

from dataclasses import dataclass, field, MISSING

from compoconf import ConfigInterface

from ..codegen.emitter import DEFAULT_RUNTIME_MODULE


@dataclass(kw_only=True)
class GeneratorConfig(ConfigInterface):
    """Settings of one generator run.

    Attributes:
        metadata: Command tree file (YAML or JSON) to generate from
        output: Destination of the generated module; ``None`` prints it
        runtime_module: Module the generated code imports its helpers from
        doc: Module docstring of the generated file
        exclude: Space-joined command paths whose subtrees are skipped
    """

    class_name: str = "Generator"
    metadata: str = field(default_factory=MISSING)
    output: str | None = None
    runtime_module: str = DEFAULT_RUNTIME_MODULE
    doc: str | None = None
    exclude: list[str] = field(default_factory=list)


__all__ = ["GeneratorConfig"]
