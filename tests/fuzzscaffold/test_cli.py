import tomllib
from pathlib import Path

import pytest

import fuzzscaffold.cli as cli
import fuzzscaffold.log as scaffold_log


def _stdout_lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return [line for line in capsys.readouterr().out.splitlines() if line.strip()]


def test_new_prints_root_and_fuzz_command(
    capsys: pytest.CaptureFixture[str], _session_scratch_dir: Path
) -> None:
    cli.main(["--log-level", "error", "new", "demo", "--target", "smoke"])

    root_line, command_line = _stdout_lines(capsys)
    root = Path(root_line)
    assert root.parent == _session_scratch_dir
    assert command_line.endswith(" fuzz")
    assert tomllib.loads((root / "Cargo.toml").read_text())["package"]["name"] == "demo"
    fuzz_manifest = tomllib.loads((root / "fuzz" / "Cargo.toml").read_text())
    assert fuzz_manifest["bin"] == [{"name": "smoke", "path": "fuzz_targets/smoke.rs"}]
    target = (root / "fuzz" / "fuzz_targets" / "smoke.rs").read_text()
    assert "demo::pass_fuzzing(data);" in target


def test_new_without_fuzz_skips_subproject(
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["--log-level", "error", "new", "plain"])

    root = Path(_stdout_lines(capsys)[0])
    assert not (root / "fuzz").exists()


def test_scratch_prints_scratch_dir(
    capsys: pytest.CaptureFixture[str], _session_scratch_dir: Path
) -> None:
    cli.main(["scratch"])

    assert _stdout_lines(capsys) == [str(_session_scratch_dir)]


def test_clean_removes_only_project_roots(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("FUZZSCAFFOLD_SCRATCH_DIR", str(tmp_path))
    (tmp_path / "t0" / "src").mkdir(parents=True)
    (tmp_path / "t12").mkdir()
    (tmp_path / "cargo-home").mkdir()
    (tmp_path / "target").mkdir()

    cli.main(["--log-level", "error", "clean"])

    assert sorted(entry.name for entry in tmp_path.iterdir()) == [
        "cargo-home",
        "target",
    ]


def test_clean_all_removes_scratch(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    scratch = tmp_path / "scratch"
    monkeypatch.setenv("FUZZSCAFFOLD_SCRATCH_DIR", str(scratch))
    (scratch / "cargo-home").mkdir(parents=True)

    cli.main(["--log-level", "error", "clean", "--all"])

    assert not scratch.exists()


def test_log_level_flag_sets_runtime_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str | None] = []
    monkeypatch.setattr(scaffold_log, "set_level", calls.append)

    cli.main(["--log-level", "debug", "scratch"])

    assert calls == ["debug"]


def test_log_level_rejects_unknown_values(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--log-level", "loud", "scratch"])

    assert excinfo.value.code != 0
    assert "--log-level" in capsys.readouterr().err


def test_os_errors_exit_nonzero(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    monkeypatch.setenv("FUZZSCAFFOLD_SCRATCH_DIR", str(blocker / "scratch"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["new", "demo"])

    assert excinfo.value.code == 1
    assert "error:" in capsys.readouterr().err
