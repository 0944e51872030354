# tests/preflight_test.py
import pytest

from fnm_setup import preflight
from fnm_setup.preflight import MissingDependencyError, check_tool


@pytest.fixture(autouse=True)
def _no_path_lookup(monkeypatch):
    monkeypatch.setattr(preflight.shutil, "which", lambda exe: None)


def test_check_tool_returns_version(fake_runner):
    run, calls = fake_runner
    run.queue.append((0, "fnm 1.37.1\n", ""))
    assert check_tool("fnm", "choco install fnm", runner=run) == "fnm 1.37.1"
    assert calls == [["fnm", "--version"]]


def test_check_tool_nonzero_exit(fake_runner):
    run, _ = fake_runner
    run.queue.append((1, "", "boom"))
    with pytest.raises(MissingDependencyError) as exc:
        check_tool("fnm", "choco install fnm", runner=run)
    assert exc.value.install_hint == "choco install fnm"
    assert str(exc.value) == "fnm is not installed or not in PATH"


def test_check_tool_missing_executable(fake_runner):
    run, _ = fake_runner
    run.queue.append(FileNotFoundError(2, "No such file or directory", "fnm"))
    with pytest.raises(MissingDependencyError) as exc:
        check_tool("fnm", runner=run)
    assert exc.value.tool == "fnm"


def test_check_tool_uses_resolved_path(monkeypatch, fake_runner):
    run, calls = fake_runner
    monkeypatch.setattr(preflight.shutil, "which", lambda exe: r"C:\ProgramData\chocolatey\bin\fnm.exe")
    check_tool("fnm", runner=run)
    assert calls[0][0] == r"C:\ProgramData\chocolatey\bin\fnm.exe"
