"""Adapters for the CI host: placeholder expansion and build outputs.

Public API:
    BuildEnvironment(variables).expand(text) -> str
    BuildOutputs(path).publish(name, value)
"""

from sonic_uploader.build.environment import BuildEnvironment
from sonic_uploader.build.outputs import BuildOutputs

__all__ = ["BuildEnvironment", "BuildOutputs"]
