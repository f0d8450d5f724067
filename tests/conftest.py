# ruff: noqa: E402

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import fuzzscaffold.log as scaffold_log
from fuzzscaffold.config import SCRATCH_DIR_ENV

pytest_plugins = ["fuzzscaffold.pytest_plugin"]


@pytest.fixture(scope="session", autouse=True)
def _session_scratch_dir(
    tmp_path_factory: pytest.TempPathFactory,
) -> Iterator[Path]:
    scratch = tmp_path_factory.mktemp("scratch")
    with pytest.MonkeyPatch.context() as monkeypatch:
        monkeypatch.setenv(SCRATCH_DIR_ENV, str(scratch))
        yield scratch


@pytest.fixture(autouse=True)
def _reset_log_state(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scaffold_log, "_configured_level", None)
    monkeypatch.setattr(scaffold_log, "_no_color", True)
