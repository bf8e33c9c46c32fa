"""Command line interface for docker_wrapper."""

from __future__ import annotations

from pathlib import Path

import click

from docker_wrapper.codegen import GenerationError, generate_module, plan_tree
from docker_wrapper.config import ConfigLoaderError, load_config_reference
from docker_wrapper.metadata import (
    MetadataLoaderError,
    dump_command_tree,
    import_command_tree,
    load_command_tree,
)
from docker_wrapper.utils.logging_config import configure_logging

_ERRORS = (ConfigLoaderError, GenerationError, MetadataLoaderError)


@click.group()
@click.option("--verbose", is_flag=True, help="Log progress messages")
@click.option("--debug", is_flag=True, help="Log debug messages")
def cli(verbose: bool, debug: bool) -> None:
    """Generate typed wrappers from command line flag metadata."""
    configure_logging(verbose=verbose, debug=debug)


@cli.command()
@click.argument("metadata", required=False, type=click.Path(path_type=Path))
@click.option("--config-ref", help="Generator config file or Hydra config name")
@click.option("--config-dir", type=click.Path(path_type=Path), default=Path("config"))
@click.option("--override", multiple=True, help="Config overrides (KEY=VALUE)")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write the module here")
@click.option("--exclude", multiple=True, help="Skip a command subtree, e.g. 'docker plugin'")
@click.option("--runtime-module", help="Module the generated code imports helpers from")
def generate(
    metadata: Path | None,
    config_ref: str | None,
    config_dir: Path,
    override: tuple[str, ...],
    output: Path | None,
    exclude: tuple[str, ...],
    runtime_module: str | None,
) -> None:
    """Generate a wrapper module from a command tree file."""
    if metadata is None and config_ref is None:
        raise click.UsageError("Provide a METADATA file or --config-ref")

    options: dict = {"exclude": list(exclude)}
    try:
        if config_ref is not None:
            cfg = load_config_reference(config_ref, config_dir, override)
            metadata = metadata or Path(cfg.metadata)
            output = output or (Path(cfg.output) if cfg.output else None)
            runtime_module = runtime_module or cfg.runtime_module
            options["exclude"] = [*cfg.exclude, *exclude]
            options["doc"] = cfg.doc
        if runtime_module:
            options["runtime_module"] = runtime_module

        root = load_command_tree(metadata)
        source = generate_module(root, **options)
    except _ERRORS as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(source, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)


@cli.command()
@click.argument("metadata", type=click.Path(path_type=Path))
@click.option("--exclude", multiple=True, help="Skip a command subtree, e.g. 'docker plugin'")
def tree(metadata: Path, exclude: tuple[str, ...]) -> None:
    """Print the commands of a tree file in generation order."""
    try:
        plans = plan_tree(load_command_tree(metadata), exclude)
    except _ERRORS as exc:
        raise click.ClickException(str(exc)) from exc

    for plan in plans:
        indent = "  " * (len(plan.path) - 1)
        option = plan.option_name or "-"
        click.echo(f"{indent}{plan.title}: {plan.builder_name} {option} ({len(plan.fields)} flags)")


@cli.command()
@click.argument("target")
@click.option("--name", help="Program name of the root command")
def dump(target: str, name: str | None) -> None:
    """Print the command tree of an argparse parser or click command
    (MODULE:ATTRIBUTE) as YAML."""
    try:
        document = dump_command_tree(import_command_tree(target, name))
    except MetadataLoaderError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(document, nl=False)


if __name__ == "__main__":
    cli()
