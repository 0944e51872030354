# conftest.py: shared pytest fixtures for fnm_setup tests
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

# Ensure the fnm_setup package is importable when running tests from a checkout
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from fnm_setup import debug_utils
from fnm_setup import standard_ui as ui
from fnm_setup.config import SetupConfig
from fnm_setup.files import FileAccess
from fnm_setup.registry import AutoRunStore, RegistryWriteError


class MemoryFiles(FileAccess):
    """In-memory filesystem: files keyed by path, directories tracked separately."""

    def __init__(self, initial=None):
        self.files = {str(k): v for k, v in (initial or {}).items()}
        self.dirs = set()
        self.writes = []

    def exists(self, path):
        p = str(path)
        return p in self.files or p in self.dirs

    def read_text(self, path):
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(str(path))

    def write_text(self, path, content):
        self.files[str(path)] = content
        self.writes.append(str(path))

    def make_dirs(self, path):
        self.dirs.add(str(path))


class MemoryStore(AutoRunStore):
    def __init__(self, values=None, fail_writes=False):
        self.values = dict(values or {})
        self.fail_writes = fail_writes
        self.set_calls = []

    def query(self, key, name):
        return self.values.get((key, name))

    def set(self, key, name, value):
        self.set_calls.append((key, name, value))
        if self.fail_writes:
            raise RegistryWriteError(key, name, "Access is denied.")
        self.values[(key, name)] = value


@pytest.fixture(autouse=True)
def _reset_globals(monkeypatch):
    """Keep verbosity and file logging from leaking between tests."""
    monkeypatch.setattr(ui, "VERBOSE", False)
    monkeypatch.setattr(debug_utils, "_console_verbosity_level", debug_utils.DEFAULT_CONSOLE_VERBOSITY)
    monkeypatch.setattr(debug_utils, "_log_file_enabled", False)
    monkeypatch.setattr(debug_utils, "_current_log_filepath", None)
    monkeypatch.setattr(debug_utils, "_log_dir", debug_utils.DEFAULT_LOG_DIR)
    monkeypatch.delenv("FORCE_ASCII_UI", raising=False)
    for var in ("FNM_SETUP_TOOL", "FNM_SETUP_REGISTRY", "FNM_SETUP_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """
    Isolated HOME/USERPROFILE so nothing touches the real user profile.
    """
    home = tmp_path / "home"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def cfg(fake_home) -> SetupConfig:
    return SetupConfig(home=fake_home)


@pytest.fixture
def mem_files():
    return MemoryFiles()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def fake_runner():
    """
    Returns (runner, calls). The runner answers with the queued results in order;
    an exception instance in the queue is raised instead.
    """
    calls = []
    queue = []

    def _run(cmd, **kwargs):
        calls.append(list(cmd))
        result = queue.pop(0) if queue else (0, "", "")
        if isinstance(result, BaseException):
            raise result
        rc, out, err = result
        return subprocess.CompletedProcess(cmd, rc, out, err)

    _run.queue = queue
    return _run, calls
