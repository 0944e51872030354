# tests/debug_utils_test.py
import pytest

from fnm_setup import debug_utils


def test_invalid_verbosity_raises():
    with pytest.raises(ValueError, match="Invalid console verbosity level"):
        debug_utils.set_console_verbosity("loud")


def test_console_threshold(capsys):
    debug_utils.write_debug("hidden", channel="Debug")
    debug_utils.write_debug("shown", channel="Warning")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "[Warning] shown" in err


def test_file_logging_writes_debug_messages(monkeypatch, tmp_path):
    monkeypatch.setattr(debug_utils, "_log_dir", str(tmp_path))
    path = debug_utils.enable_file_logging()
    debug_utils.write_debug("profile resolved", channel="Debug")
    debug_utils.disable_file_logging()
    text = open(path, encoding="utf-8").read()
    assert "[Debug] profile resolved" in text
    assert path.startswith(str(tmp_path / "fnm_setup"))


def test_old_logs_are_pruned(monkeypatch, tmp_path):
    log_dir = tmp_path / "fnm_setup"
    log_dir.mkdir()
    for i in range(debug_utils.MAX_LOG_FILES + 5):
        (log_dir / f"old{i:02d}.log").write_text("x")
    monkeypatch.setattr(debug_utils, "_log_dir", str(tmp_path))
    debug_utils.enable_file_logging()
    assert len(list(log_dir.glob("*.log"))) <= debug_utils.MAX_LOG_FILES
