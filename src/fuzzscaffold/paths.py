"""Path helpers for the scratch area and generated project layout."""

import sys
from pathlib import Path, PurePath

from .config import load_settings

SCRATCH_DIRNAME = "tests"
CARGO_HOME_DIRNAME = "cargo-home"
SHARED_TARGET_DIRNAME = "target"
ROOT_PREFIX = "t"

MANIFEST_FILENAME = "Cargo.toml"
SRC_DIRNAME = "src"
LIB_FILENAME = "lib.rs"
MAIN_FILENAME = "main.rs"
BUILD_DIRNAME = "target"
FUZZ_DIRNAME = "fuzz"
FUZZ_TARGETS_DIRNAME = "fuzz_targets"
SOURCE_SUFFIX = ".rs"

MANIFEST_PATH = PurePath(MANIFEST_FILENAME)
LIB_PATH = PurePath(SRC_DIRNAME, LIB_FILENAME)
MAIN_PATH = PurePath(SRC_DIRNAME, MAIN_FILENAME)
ENTRY_MODULE_PATHS = (LIB_PATH, MAIN_PATH)
FUZZ_MANIFEST_PATH = PurePath(FUZZ_DIRNAME, MANIFEST_FILENAME)

# Interpreter name plus its bin/ (or Scripts/) directory.
_EXECUTABLE_LAYERS = 2


def derived_scratch_dir(executable: Path | str | None = None) -> Path:
    """Return the scratch area implied by an interpreter location.

    Args:
        executable: Interpreter path; defaults to ``sys.executable``.

    Returns:
        Sibling ``tests`` directory of the interpreter's bin directory.

    Example:
        >>> derived_scratch_dir("/work/.venv/bin/python").as_posix()
        '/work/.venv/tests'
    """
    path = Path(executable if executable is not None else sys.executable)
    for _ in range(_EXECUTABLE_LAYERS):
        path = path.parent
    return path / SCRATCH_DIRNAME


def scratch_dir() -> Path:
    """Return the shared scratch area, creating it when missing.

    ``FUZZSCAFFOLD_SCRATCH_DIR`` takes precedence over the location derived
    from the running interpreter.

    Returns:
        Absolute path to the scratch area.
    """
    configured = load_settings().scratch_dir
    path = configured if configured is not None else derived_scratch_dir()
    path = path.absolute()
    path.mkdir(parents=True, exist_ok=True)
    return path


def root_dir_name(root_id: int) -> str:
    """Return the directory name for a test root id.

    Example:
        >>> root_dir_name(12)
        't12'
    """
    return f"{ROOT_PREFIX}{root_id}"


def is_root_dir_name(name: str) -> bool:
    """Return whether a directory name looks like a generated test root.

    Example:
        >>> is_root_dir_name("t3"), is_root_dir_name("target")
        (True, False)
    """
    suffix = name[len(ROOT_PREFIX) :]
    return name.startswith(ROOT_PREFIX) and suffix.isdigit()


def shared_cargo_home() -> Path:
    """Return the package cache shared by every generated project."""
    return scratch_dir() / CARGO_HOME_DIRNAME


def shared_target_dir() -> Path:
    """Return the build-artifact directory shared by every generated project."""
    return scratch_dir() / SHARED_TARGET_DIRNAME


def fuzz_target_relpath(name: str) -> PurePath:
    """Return a fuzz target source path relative to the fuzz sub-project.

    Any existing suffix on ``name`` is replaced by the source suffix.

    Example:
        >>> fuzz_target_relpath("t1").as_posix()
        'fuzz_targets/t1.rs'
        >>> fuzz_target_relpath("parse.v2").as_posix()
        'fuzz_targets/parse.rs'
    """
    return (PurePath(FUZZ_TARGETS_DIRNAME) / name).with_suffix(SOURCE_SUFFIX)
