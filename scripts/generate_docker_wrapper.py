#!/usr/bin/env python3
"""Generate a static wrapper module for the docker command line."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from docker_wrapper.codegen import GenerationError, generate_module
from docker_wrapper.metadata import MetadataLoaderError, load_command_tree, load_packaged_tree
from docker_wrapper.utils.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

_DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "docker_wrapper" / "docker_gen.py"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--metadata", type=Path, help="Command tree file (default: packaged docker.yaml)")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--output", type=Path, default=_DEFAULT_OUTPUT, help="Module file to write")
    target.add_argument("--stdout", action="store_true", help="Print the module instead of writing it")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATH",
        help="Command path to leave out, e.g. 'docker plugin'; repeatable",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not report the written file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        root = load_command_tree(args.metadata) if args.metadata else load_packaged_tree("docker.yaml")
        source = generate_module(root, exclude=args.exclude)
    except (GenerationError, MetadataLoaderError) as exc:
        LOGGER.error(f"Generation failed: {exc}")
        return 1

    if args.stdout:
        sys.stdout.write(source)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(source, encoding="utf-8")
    if not args.quiet:
        print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
