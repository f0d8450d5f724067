"""Scaffolding failure contracts.

Scaffolding is test support, so failures are fatal to the calling test. I/O
errors propagate as the ``OSError`` that was raised. Misuse of the builder
raises a ``ScaffoldFailure`` subclass; nothing in this package catches it
except the CLI entrypoint.
"""

from __future__ import annotations

from typing import Literal

ScaffoldFailureCode = Literal["precondition_failed"]


class ScaffoldFailure(Exception):
    """Base class for scaffolding misuse."""

    def __init__(
        self,
        code: ScaffoldFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class PreconditionFailedError(ScaffoldFailure):
    """An operation was called before the state it depends on existed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("precondition_failed", message, recovery_hint=recovery_hint)


class FuzzSubprojectMissingError(PreconditionFailedError):
    """A fuzz target was added before the fuzz sub-project manifest existed."""

    def __init__(self, manifest: object) -> None:
        super().__init__(
            f"fuzz manifest not found: {manifest}",
            recovery_hint="call with_fuzz() before fuzz_target()",
        )
        self.manifest = manifest

