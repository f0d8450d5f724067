"""Tests for typed command execution helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from fuzzscaffold import exec as exec_util


def test_subprocess_command_runner_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runner returns typed output and forwards execution options."""
    calls: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        calls["argv"] = argv
        calls["kwargs"] = kwargs
        return subprocess.CompletedProcess(argv, 0, stdout="ok", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(
        argv=("cargo-fuzz", "fuzz", "build"),
        cwd=Path("/tmp"),
        env={"CARGO_HOME": "/tmp/cargo-home"},
        capture_output=True,
        text=True,
        timeout_seconds=5.0,
        stdin=subprocess.DEVNULL,
    )
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result == exec_util.CommandResult(
        argv=("cargo-fuzz", "fuzz", "build"),
        returncode=0,
        stdout="ok",
        stderr="",
    )
    assert calls["argv"] == ["cargo-fuzz", "fuzz", "build"]
    run_kwargs = calls["kwargs"]
    assert isinstance(run_kwargs, dict)
    assert run_kwargs["cwd"] == Path("/tmp")
    assert run_kwargs["env"] == {"CARGO_HOME": "/tmp/cargo-home"}
    assert run_kwargs["capture_output"] is True
    assert run_kwargs["text"] is True
    assert run_kwargs["timeout"] == 5.0
    assert run_kwargs["stdin"] == subprocess.DEVNULL


def test_subprocess_command_runner_returns_none_when_missing_executable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Runner returns None when executable is not found."""

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        del argv, kwargs
        raise FileNotFoundError

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(argv=("missing-cmd",))
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result is None


def test_subprocess_command_runner_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runner normalizes timeout failures into typed timeout results."""

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        del kwargs
        raise subprocess.TimeoutExpired(
            cmd=argv, timeout=0.05, output="slow", stderr="timeout"
        )

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(argv=("sleep", "1"), timeout_seconds=0.05)
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result is not None
    assert result.timed_out is True
    assert result.returncode == 124
    assert result.succeeded is False
    assert result.stdout == "slow"
    assert result.stderr == "timeout"


def test_with_args_appends_without_mutating() -> None:
    """with_args returns a new request and leaves the base request intact."""
    base = exec_util.CommandRequest(argv=("cargo-fuzz", "fuzz"), cwd=Path("/p"))

    extended = base.with_args("run", "t1")

    assert extended.argv == ("cargo-fuzz", "fuzz", "run", "t1")
    assert extended.cwd == Path("/p")
    assert base.argv == ("cargo-fuzz", "fuzz")


def test_display_quotes_arguments() -> None:
    request = exec_util.CommandRequest(argv=("cargo-fuzz", "fuzz", "run", "a b"))

    assert request.display() == "cargo-fuzz fuzz run 'a b'"


def test_run_with_runner_uses_injected_runner() -> None:
    """run_with_runner uses the provided command-runner implementation."""

    class FakeRunner:
        def run(
            self, request: exec_util.CommandRequest
        ) -> exec_util.CommandResult | None:
            assert request.argv == ("cargo-fuzz", "fuzz", "list")
            return exec_util.CommandResult(
                argv=request.argv,
                returncode=0,
                stdout="t1",
                stderr="",
            )

    result = exec_util.run_with_runner(
        exec_util.CommandRequest(argv=("cargo-fuzz", "fuzz", "list")),
        runner=FakeRunner(),
    )

    assert result is not None
    assert result.stdout == "t1"
