import importlib.util
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docker_wrapper.metadata import CommandNode, FlagSpec  # noqa: E402


def build_sample_tree() -> CommandNode:
    return CommandNode(
        name="docker",
        usage="docker [OPTIONS] COMMAND [ARG...]",
        short="A self-sufficient runtime for containers",
        flags=(
            FlagSpec("debug", "bool", "Enable debug mode"),
            FlagSpec("host", "list", "Daemon socket(s) to connect to"),
        ),
        commands=(
            CommandNode(
                name="build",
                usage="build [OPTIONS] PATH | URL | -",
                short="Build an image from a Dockerfile",
                flags=(
                    FlagSpec("no-cache", "bool", "Do not use cache when building the image"),
                    FlagSpec("tag", "list", 'Name and optionally a tag in the "name:tag" format'),
                    FlagSpec("label", "map", "Set metadata for an image"),
                    FlagSpec("cpu-shares", "int64", "CPU shares (relative weight)"),
                    FlagSpec("memory", "bytes", "Memory limit"),
                ),
            ),
            CommandNode(
                name="container",
                usage="container",
                short="Manage containers",
                commands=(
                    CommandNode(
                        name="stop",
                        usage="stop [OPTIONS] CONTAINER [CONTAINER...]",
                        short="Stop one or more running containers",
                        flags=(FlagSpec("time", "int", "Seconds to wait for stop before killing it"),),
                    ),
                    CommandNode(
                        name="ls",
                        usage="ls [OPTIONS]",
                        short="List containers",
                        flags=(
                            FlagSpec("all", "bool", "Show all containers (default shows just running)"),
                            FlagSpec("filter", "filter", "Filter output based on conditions provided"),
                            FlagSpec("last", "int", "Show n last created containers (includes all states)"),
                        ),
                    ),
                ),
            ),
            CommandNode(
                name="plugin",
                usage="plugin",
                short="Manage plugins",
                commands=(
                    CommandNode(
                        name="set-default",
                        usage="set-default PLUGIN",
                        short="Make a plugin the default",
                    ),
                ),
            ),
        ),
    )


@pytest.fixture
def sample_tree() -> CommandNode:
    return build_sample_tree()


@pytest.fixture
def load_generated(tmp_path, monkeypatch):
    """Write generated source to a module file and import it."""

    def _load(source: str, name: str = "generated_wrappers"):
        path = tmp_path / f"{name}.py"
        path.write_text(source, encoding="utf-8")
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        monkeypatch.setitem(sys.modules, name, module)
        spec.loader.exec_module(module)
        return module

    return _load
