from pathlib import Path

import yaml
from click.testing import CliRunner

from docker_wrapper.cli import cli
from docker_wrapper.codegen import generate_module
from docker_wrapper.metadata import dump_command_tree

PARSER_MODULE = '''
import argparse


def build_parser():
    parser = argparse.ArgumentParser(prog="tool")
    parser.add_argument("--level", type=int, default=0, help="Verbosity level")
    sub = parser.add_subparsers(dest="command")
    run = sub.add_parser("run", help="Run the job")
    run.add_argument("--dry-run", action="store_true", help="Print only")
    return parser
'''


def _write_tree(tmp_path: Path, tree) -> Path:
    path = tmp_path / "tree.yaml"
    path.write_text(dump_command_tree(tree))
    return path


def test_generate_to_stdout(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    result = CliRunner().invoke(cli, ["generate", str(tree_file)])
    assert result.exit_code == 0, result.output
    assert result.stdout == generate_module(sample_tree)


def test_generate_to_file_with_exclude(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    output = tmp_path / "out" / "wrappers.py"
    result = CliRunner().invoke(
        cli,
        ["generate", str(tree_file), "--output", str(output), "--exclude", "docker plugin"],
    )
    assert result.exit_code == 0, result.output
    assert f"Wrote {output}" in result.output
    source = output.read_text()
    assert "def DockerBuildCmd(" in source
    assert "DockerPluginCmd" not in source


def test_generate_runtime_module(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    result = CliRunner().invoke(cli, ["generate", str(tree_file), "--runtime-module", "pkg.rt"])
    assert result.exit_code == 0, result.output
    assert "from pkg.rt import Command, build_command" in result.stdout


def test_generate_from_config(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    output = tmp_path / "from_config.py"
    config = tmp_path / "generate.yaml"
    config.write_text(
        yaml.safe_dump(
            {
                "metadata": str(tree_file),
                "output": str(output),
                "doc": "Configured wrappers.",
                "exclude": ["docker container"],
            }
        )
    )
    result = CliRunner().invoke(
        cli, ["generate", "--config-ref", str(config), "--exclude", "docker plugin"]
    )
    assert result.exit_code == 0, result.output
    source = output.read_text()
    assert source.startswith('"""Configured wrappers."""')
    assert "DockerContainerStopCmd" not in source
    assert "DockerPluginCmd" not in source
    assert "DockerBuildCmd" in source


def test_generate_config_override(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    config = tmp_path / "generate.yaml"
    config.write_text(yaml.safe_dump({"metadata": str(tree_file)}))
    result = CliRunner().invoke(
        cli,
        ["generate", "--config-ref", str(config), "--override", "runtime_module=pkg.rt"],
    )
    assert result.exit_code == 0, result.output
    assert "from pkg.rt import" in result.stdout


def test_generate_requires_input() -> None:
    result = CliRunner().invoke(cli, ["generate"])
    assert result.exit_code == 2
    assert "--config-ref" in result.output


def test_generate_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["generate", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_generate_reports_collisions(tmp_path: Path) -> None:
    tree_file = tmp_path / "tree.yaml"
    tree_file.write_text(
        yaml.safe_dump({"name": "tool", "flags": [{"name": "all", "type": "bool"}, {"name": "all"}]})
    )
    result = CliRunner().invoke(cli, ["generate", str(tree_file)])
    assert result.exit_code == 1
    assert "duplicate flag --all" in result.output


def test_tree(tmp_path: Path, sample_tree) -> None:
    tree_file = _write_tree(tmp_path, sample_tree)
    result = CliRunner().invoke(cli, ["tree", str(tree_file), "--exclude", "docker plugin"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "docker: DockerCmd DockerOption (2 flags)",
        "  docker build: DockerBuildCmd DockerBuildOption (5 flags)",
        "  docker container: DockerContainerCmd - (0 flags)",
        "    docker container stop: DockerContainerStopCmd DockerContainerStopOption (1 flags)",
        "    docker container ls: DockerContainerLsCmd DockerContainerLsOption (3 flags)",
    ]


def test_dump_argparse(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "cli_dump_parser.py").write_text(PARSER_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    result = CliRunner().invoke(cli, ["dump", "cli_dump_parser:build_parser"])
    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["name"] == "tool"
    assert data["flags"] == [{"name": "level", "type": "int", "help": "Verbosity level"}]
    [run] = data["commands"]
    assert run["name"] == "run"
    assert run["short"] == "Run the job"
    assert run["flags"] == [{"name": "dry-run", "type": "bool", "help": "Print only"}]


def test_dump_click_with_name() -> None:
    result = CliRunner().invoke(cli, ["dump", "docker_wrapper.cli:cli", "--name", "docker-wrapper"])
    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["name"] == "docker-wrapper"
    assert [flag["name"] for flag in data["flags"]] == ["verbose", "debug"]
    assert [command["name"] for command in data["commands"]] == ["dump", "generate", "tree"]
    generate = data["commands"][1]
    flags = {flag["name"]: flag["type"] for flag in generate["flags"]}
    assert flags["exclude"] == "list"
    assert flags["override"] == "list"


def test_dump_invalid_target() -> None:
    result = CliRunner().invoke(cli, ["dump", "no_attribute_given"])
    assert result.exit_code == 1
    assert "MODULE:ATTRIBUTE" in result.output


def test_dump_keeps_dollar_braces(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "cli_dump_dollar.py").write_text(
        "import argparse\n"
        "parser = argparse.ArgumentParser(prog='tool')\n"
        "parser.add_argument('--fmt', help='Templates like ${oops are fine')\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    result = CliRunner().invoke(cli, ["dump", "cli_dump_dollar:parser"])
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output)["flags"][0]["help"] == "Templates like ${oops are fine"
