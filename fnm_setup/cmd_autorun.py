# fnm_setup/cmd_autorun.py
"""
cmd.exe wiring: a guarded init script in the user's home plus a reference to it
in HKCU\\Software\\Microsoft\\Command Processor\\AutoRun.

The init script is rewritten on every run so it always matches the current
template; the AutoRun registration is only added once.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import standard_ui as ui
from .config import SetupConfig
from .debug_utils import write_debug
from .files import FileAccess
from .registry import AutoRunStore, RegistryWriteError
from .templates import cmd_init_script

AUTORUN_SEPARATOR = " & "

CONFIGURED = "configured"
ALREADY = "already"
MANUAL = "manual"


@dataclass(frozen=True)
class CmdResult:
    init_file: Path
    status: str
    autorun: Optional[str] = None


def write_init_script(cfg: SetupConfig, files: FileAccess) -> Path:
    path = cfg.cmd_init_file
    files.write_text(path, cmd_init_script(cfg.tool, cfg.env_flags))
    ui.log_success(f"Created initialization script: {path}")
    return path


def compose_autorun(existing: Optional[str], init_file: str) -> str:
    existing = (existing or "").strip()
    return f"{existing}{AUTORUN_SEPARATOR}{init_file}" if existing else init_file


def print_manual_instructions(cfg: SetupConfig) -> None:
    ui.log_detail("Manual setup: Add this to registry:", icon="edit")
    ui.log_plain(f"      {cfg.autorun_location}")
    ui.log_plain(f"      Value: {cfg.cmd_init_file}")


def configure_cmd(cfg: SetupConfig, files: FileAccess, store: AutoRunStore) -> CmdResult:
    init_file = write_init_script(cfg, files)
    init_str = str(init_file)

    current = store.query(cfg.autorun_key, cfg.autorun_name)
    write_debug(f"Current AutoRun: {current!r}", channel="Debug")
    if current and init_str in current:
        ui.log_warning("AutoRun already configured")
        return CmdResult(init_file, ALREADY, current)

    new_value = compose_autorun(current, init_str)
    try:
        store.set(cfg.autorun_key, cfg.autorun_name, new_value)
    except RegistryWriteError as e:
        write_debug(str(e), channel="Warning")
        ui.log_warning("Could not configure AutoRun automatically")
        print_manual_instructions(cfg)
        return CmdResult(init_file, MANUAL, current)

    ui.log_success("Configured AutoRun in registry")
    return CmdResult(init_file, CONFIGURED, new_value)
