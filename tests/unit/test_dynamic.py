import pickle
import sys
import types
from dataclasses import fields, is_dataclass

import pytest

from docker_wrapper.codegen import generate_module
from docker_wrapper.dynamic import build_wrappers


def test_build_wrappers_names_follow_traversal(sample_tree):
    wrappers = build_wrappers(sample_tree)
    assert list(wrappers) == [
        "DockerOption",
        "DockerCmd",
        "DockerBuildOption",
        "DockerBuildCmd",
        "DockerContainerCmd",
        "DockerContainerStopOption",
        "DockerContainerStopCmd",
        "DockerContainerLsOption",
        "DockerContainerLsCmd",
        "DockerPluginCmd",
        "DockerPluginSetDefaultCmd",
    ]


def test_option_classes_are_kw_only_dataclasses(sample_tree):
    option_cls = build_wrappers(sample_tree)["DockerBuildOption"]
    assert is_dataclass(option_cls)
    assert [item.name for item in fields(option_cls)] == ["no_cache", "tag", "label", "cpu_shares", "memory"]
    assert all(item.default is None for item in fields(option_cls))
    with pytest.raises(TypeError):
        option_cls(True)


def test_scenarios(sample_tree):
    w = build_wrappers(sample_tree)

    build = w["DockerBuildCmd"](w["DockerBuildOption"](no_cache=True, tag=["a:1", "b:2"]), ["."])
    assert list(build.args) == ["build", "--no-cache=true", "--tag", "a:1", "--tag", "b:2", "."]
    assert list(w["DockerBuildCmd"](w["DockerBuildOption"](), ["."]).args) == ["build", "."]

    stop = w["DockerContainerStopCmd"](w["DockerContainerStopOption"](time=10), ["c1", "c2"])
    assert list(stop.args) == ["container", "stop", "--time=10", "c1", "c2"]


def test_builders_carry_names_and_docs(sample_tree):
    builder = build_wrappers(sample_tree, module="wrappers")["DockerContainerStopCmd"]
    assert builder.__name__ == "DockerContainerStopCmd"
    assert builder.__module__ == "wrappers"
    assert builder.__doc__ == "Build the 'docker container stop' invocation."


def test_builder_without_flags_takes_only_positionals(sample_tree):
    builder = build_wrappers(sample_tree)["DockerContainerCmd"]
    assert list(builder(["ps"]).args) == ["container", "ps"]
    assert list(builder().args) == ["container"]
    assert "opt" not in builder.__annotations__


def test_matches_generated_module(sample_tree, load_generated):
    module = load_generated(generate_module(sample_tree))
    wrappers = build_wrappers(sample_tree)
    assert sorted(wrappers) == sorted(module.__all__)

    option = dict(no_cache=False, tag=["x"], label={"k": "v"}, cpu_shares=3, memory="1g")
    static = module.DockerBuildCmd(module.DockerBuildOption(**option), ["ctx"])
    dynamic = wrappers["DockerBuildCmd"](wrappers["DockerBuildOption"](**option), ["ctx"])
    assert static == dynamic


def test_records_pickle_when_exposed_by_a_module(sample_tree, monkeypatch):
    module = types.ModuleType("pickled_wrappers")
    module.__dict__.update(build_wrappers(sample_tree, module=module.__name__))
    monkeypatch.setitem(sys.modules, module.__name__, module)

    option = module.DockerContainerStopOption(time=5)
    assert pickle.loads(pickle.dumps(option)) == option
