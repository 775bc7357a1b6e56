from pathlib import Path

import pytest

from create_comet import exec as exec_util
from create_comet import setup_steps


class _Runner:
    def __init__(self, returncode: int | None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        if self.returncode is None:
            return None
        return exec_util.CommandResult(
            argv=request.argv, returncode=self.returncode, stdout="", stderr=self.stderr
        )


def test_initialize_git_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    runner = _Runner(0)

    assert setup_steps.initialize_git(tmp_path, runner=runner) is True

    assert runner.requests[0].argv == ("git", "init")
    assert runner.requests[0].cwd == tmp_path
    assert "Git repository initialized." in capsys.readouterr().out


def test_initialize_git_missing_binary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert setup_steps.initialize_git(tmp_path, runner=_Runner(None)) is False

    err = capsys.readouterr().err
    assert "Failed to initialize git. Is git installed?" in err
    assert "Error: Could not initialize git repository." in err
    assert "missing required command: git" in err


def test_initialize_git_uses_configured_command(tmp_path: Path) -> None:
    runner = _Runner(0)

    setup_steps.initialize_git(tmp_path, git_command="/opt/git/bin/git", runner=runner)

    assert runner.requests[0].argv == ("/opt/git/bin/git", "init")


def test_install_dependencies_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    runner = _Runner(0)

    assert setup_steps.install_dependencies(tmp_path, runner=runner) is True

    assert runner.requests[0].argv == ("bun", "install")
    assert runner.requests[0].cwd == tmp_path
    assert "Dependencies installed." in capsys.readouterr().out


def test_install_dependencies_failure_prints_hint(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    runner = _Runner(1, stderr="network unreachable")

    assert setup_steps.install_dependencies(tmp_path, package_manager="pnpm", runner=runner) is False

    err = capsys.readouterr().err
    assert "Failed to install dependencies." in err
    assert "Error: Dependency installation failed." in err
    assert "network unreachable" in err
    assert "You can try running 'pnpm install' manually." in err


def test_initialize_git_non_executable_binary(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    git = bin_dir / "git"
    git.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    git.chmod(0o644)
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))

    assert setup_steps.initialize_git(project) is False

    err = capsys.readouterr().err
    assert "Error: Could not initialize git repository." in err
    assert "could not run command: git" in err
    assert "Permission denied" in err


def test_install_dependencies_in_missing_directory(tmp_path: Path) -> None:
    assert setup_steps.install_dependencies(tmp_path / "gone") is False
