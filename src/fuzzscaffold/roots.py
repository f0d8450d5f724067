"""Per-test root directory allocation.

Every logical test owns a ``TestContext``. The first time a context asks for
a root it receives the next id from the process-wide counter; later requests
from the same context return the same directory.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

from . import log, paths
from .builder import ProjectBuilder


class RootIdCounter:
    """Monotonic id source shared by every thread in the process."""

    def __init__(self, start: int = 0) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value


# Created once at import; never reset for the lifetime of the process.
PROCESS_COUNTER = RootIdCounter()


@dataclass(eq=False)
class TestContext:
    """Identity holder for one logical test.

    Attributes:
        label: Human-readable name, usually the pytest node id.
    """

    __test__ = False

    label: str = ""
    _root_id: int | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def root_id(self) -> int | None:
        """Return the memoized id, or ``None`` before the first allocation."""
        return self._root_id

    def claim_id(self, counter: RootIdCounter) -> int:
        with self._lock:
            if self._root_id is None:
                self._root_id = counter.next_id()
            return self._root_id


@dataclass(frozen=True)
class TestRoot:
    """Allocated scratch directory for a logical test."""

    __test__ = False

    path: Path
    id: int


def allocate_root(
    context: TestContext, *, counter: RootIdCounter | None = None
) -> TestRoot:
    """Return the root owned by ``context``, assigning an id on first use.

    Args:
        context: Logical test requesting a root.
        counter: Id source; defaults to the process-wide counter.

    Returns:
        ``TestRoot`` under the shared scratch area.
    """
    first_use = context.root_id is None
    root_id = context.claim_id(counter or PROCESS_COUNTER)
    root = TestRoot(path=paths.scratch_dir() / paths.root_dir_name(root_id), id=root_id)
    if first_use:
        log.debug(f"allocated root {root.path} for {context.label or 'test'}")
    return root


def next_root(context: TestContext) -> Path:
    """Return the root directory path for ``context``."""
    return allocate_root(context).path


def project(name: str, context: TestContext) -> ProjectBuilder:
    """Start building a project named ``name`` in the context's root."""
    return ProjectBuilder(name, next_root(context))
