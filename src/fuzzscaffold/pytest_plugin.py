"""Pytest fixtures for generating projects.

Enable with ``pytest_plugins = ["fuzzscaffold.pytest_plugin"]`` in a
``conftest.py``.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from .builder import ProjectBuilder
from .roots import TestContext, project


@pytest.fixture
def scaffold_context(request: pytest.FixtureRequest) -> TestContext:
    """Identity of the running test, allocated a root on first use."""
    return TestContext(label=request.node.nodeid)


@pytest.fixture
def fuzz_project(
    scaffold_context: TestContext,
) -> Callable[[str], ProjectBuilder]:
    """Factory returning a builder rooted in this test's directory."""

    def factory(name: str) -> ProjectBuilder:
        return project(name, scaffold_context)

    return factory
