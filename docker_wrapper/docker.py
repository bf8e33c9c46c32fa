"""Wrappers of every ``docker`` subcommand.

``docker container run`` is exposed as ``DockerContainerRunCmd`` together
with its option record ``DockerContainerRunOption``; commands without flags
only get a builder::

    from docker_wrapper.docker import DockerBuildCmd, DockerBuildOption

    cmd = DockerBuildCmd(DockerBuildOption(no_cache=True, tag=["app:1"]), ["."])
    print(cmd.combined_output())

The objects are built when this module is imported, from the flag metadata
shipped in ``docker_wrapper/data/docker.yaml``. Run
``scripts/generate_docker_wrapper.py`` for a static module with the same
contents.
"""

from __future__ import annotations

from .dynamic import build_wrappers
from .metadata.loader import load_packaged_tree

DOCKER_TREE = load_packaged_tree("docker.yaml")

_WRAPPERS = build_wrappers(DOCKER_TREE, module=__name__)
globals().update(_WRAPPERS)

__all__ = ["DOCKER_TREE", *_WRAPPERS]
