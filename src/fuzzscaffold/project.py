"""Immutable handle to a generated project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from . import paths
from .config import load_settings
from .exec import CommandRequest

CARGO_HOME_ENV = "CARGO_HOME"
CARGO_TARGET_DIR_ENV = "CARGO_TARGET_DIR"
FUZZ_SUBCOMMAND = "fuzz"


@dataclass(frozen=True)
class Project:
    """A generated project on disk.

    Attributes:
        name: Package name of the parent project.
        root: Project root directory.

    Example:
        >>> Project(name="foo", root=Path("/scratch/t0")).fuzz_dir().as_posix()
        '/scratch/t0/fuzz'
    """

    name: str
    root: Path

    def build_dir(self) -> Path:
        return self.root / paths.BUILD_DIRNAME

    def fuzz_dir(self) -> Path:
        return self.root / paths.FUZZ_DIRNAME

    def fuzz_manifest(self) -> Path:
        return self.root / paths.FUZZ_MANIFEST_PATH

    def fuzz_targets_dir(self) -> Path:
        return self.fuzz_dir() / paths.FUZZ_TARGETS_DIRNAME

    def fuzz_target_path(self, target: str) -> Path:
        return self.fuzz_dir() / paths.fuzz_target_relpath(target)

    def command_env(self) -> dict[str, str]:
        """Return the inherited environment with the shared cache overrides.

        Every generated project in the run points at the same package cache
        and build-artifact directory so the fuzzing support crate is fetched
        and compiled once.
        """
        env = dict(os.environ)
        env[CARGO_HOME_ENV] = str(paths.shared_cargo_home())
        env[CARGO_TARGET_DIR_ENV] = str(paths.shared_target_dir())
        return env

    def command(self, *argv: str) -> CommandRequest:
        """Describe running ``argv`` in the project root with shared caches."""
        return CommandRequest(argv=tuple(argv), cwd=self.root, env=self.command_env())

    def fuzz_command(self, *args: str) -> CommandRequest:
        """Describe a ``fuzz`` subcommand invocation against this project.

        The request is returned unexecuted.

        Args:
            *args: Extra arguments after ``fuzz`` (for example ``"build"``).

        Returns:
            ``CommandRequest`` for the configured fuzz executable.
        """
        fuzz_bin = load_settings().fuzz_bin
        return self.command(fuzz_bin, FUZZ_SUBCOMMAND, *args)
