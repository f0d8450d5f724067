"""Disposable project scaffolding for fuzzing-tool integration tests.

Example:
    >>> from fuzzscaffold import __version__
    >>> isinstance(__version__, str)
    True
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .builder import ManifestState, ProjectBuilder
from .errors import FuzzSubprojectMissingError, ScaffoldFailure
from .project import Project
from .roots import TestContext, TestRoot, allocate_root, next_root, project

__all__ = [
    "FuzzSubprojectMissingError",
    "ManifestState",
    "Project",
    "ProjectBuilder",
    "ScaffoldFailure",
    "TestContext",
    "TestRoot",
    "__version__",
    "allocate_root",
    "next_root",
    "project",
]

try:
    __version__ = version("fuzzscaffold")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"
