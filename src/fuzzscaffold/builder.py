"""Builder that stages files into a fresh project root."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path, PurePath

from . import log, manifests, paths
from .errors import FuzzSubprojectMissingError
from .project import Project

FileContent = str | bytes
RelPath = str | PurePath


@dataclass
class ManifestState:
    """Which canonical files the caller staged explicitly.

    Attributes:
        saw_manifest: ``Cargo.toml`` was written.
        saw_entry_module: ``src/lib.rs`` or ``src/main.rs`` was written.
    """

    saw_manifest: bool = False
    saw_entry_module: bool = False

    def record(self, path: RelPath) -> None:
        candidate = PurePath(path)
        if candidate == paths.MANIFEST_PATH:
            self.saw_manifest = True
        if candidate in paths.ENTRY_MODULE_PATHS:
            self.saw_entry_module = True


class ProjectBuilder:
    """Stage files for a generated project and finalize it with ``build()``.

    Constructing a builder wipes ``root`` and recreates it empty. Every
    staging call writes to disk immediately.

    Args:
        name: Package name of the parent project.
        root: Directory the project is generated in.
    """

    def __init__(self, name: str, root: Path) -> None:
        self._project = Project(name=name, root=root)
        self._state = ManifestState()
        log.info(f" ============ {root} =============== ")
        shutil.rmtree(root, ignore_errors=True)
        root.mkdir(parents=True, exist_ok=True)

    @property
    def name(self) -> str:
        return self._project.name

    @property
    def root(self) -> Path:
        return self._project.root

    @property
    def state(self) -> ManifestState:
        return self._state

    def file(self, path: RelPath, content: FileContent) -> ProjectBuilder:
        """Write ``content`` to ``path`` under the root, replacing any file.

        Args:
            path: Location relative to the project root.
            content: Text (written as UTF-8) or raw bytes.

        Returns:
            The builder, for chaining.
        """
        self._write(path, content)
        self._state.record(path)
        return self

    def _write(self, path: RelPath, content: FileContent) -> Path:
        target = self.root / path
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
        return target

    def with_fuzz(self) -> ProjectBuilder:
        """Stage the fuzz sub-project manifest.

        Must precede any ``fuzz_target`` call. Calling it again rewrites the
        manifest, dropping targets declared so far.
        """
        return self.file(
            paths.FUZZ_MANIFEST_PATH, manifests.fuzz_manifest(self.name)
        )

    def fuzz_target(self, name: str, body: FileContent) -> ProjectBuilder:
        """Declare a fuzz target and write its source.

        Args:
            name: Binary target name.
            body: Source of the target program, written verbatim.

        Returns:
            The builder, for chaining.

        Raises:
            FuzzSubprojectMissingError: ``with_fuzz`` was not called first.
        """
        fuzz_manifest = self._project.fuzz_manifest()
        if not fuzz_manifest.is_file():
            raise FuzzSubprojectMissingError(fuzz_manifest)
        relpath = paths.fuzz_target_relpath(name)
        with fuzz_manifest.open("a", encoding="utf-8") as handle:
            handle.write(manifests.bin_target_block(name, relpath))
        log.debug(f"declared fuzz target {name} in {fuzz_manifest}")
        return self.file(PurePath(paths.FUZZ_DIRNAME) / relpath, body)

    def default_manifest(self) -> ProjectBuilder:
        """Stage the minimal parent manifest."""
        return self.file(paths.MANIFEST_PATH, manifests.default_manifest(self.name))

    def default_entry_module(self) -> ProjectBuilder:
        """Stage ``src/lib.rs`` with the pass/fail fuzzing fixtures."""
        return self.file(paths.LIB_PATH, manifests.DEFAULT_LIB_SOURCE)

    def build(self) -> Project:
        """Fill in missing defaults and return an immutable project handle."""
        if not self._state.saw_manifest:
            log.debug(f"synthesizing default manifest for {self.name}")
            self.default_manifest()
        if not self._state.saw_entry_module:
            log.debug(f"synthesizing default entry module for {self.name}")
            self.default_entry_module()
        return Project(name=self._project.name, root=self._project.root)
