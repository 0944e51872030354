# fnm_setup/cli.py
from __future__ import annotations

import argparse
import platform
from typing import Callable, List, Optional

from . import __version__
from . import debug_utils
from . import standard_ui as ui
from .cmd_autorun import ALREADY, CONFIGURED, configure_cmd
from .config import SetupConfig, load_config
from .files import FileAccess, LocalFiles
from .powershell import configure_powershell
from .preflight import MissingDependencyError, check_tool
from .registry import AutoRunStore, make_store

NEXT_STEPS = [
    "Open a new PowerShell window to test PowerShell setup",
    "Open a new Command Prompt window to test cmd.exe setup",
    "Run: {tool} install <version> to install Node.js",
    "Run: {tool} use <version> to switch Node.js versions",
]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="setup-fnm-windows",
        description="Configure PowerShell and Command Prompt to initialise fnm (Fast Node Manager) automatically.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show informational messages.")
    p.add_argument("-l", "--log-file", action="store_true", help="Also write debug output to ~/logs/fnm_setup/.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _print_next_steps(cfg: SetupConfig) -> None:
    ui.log_plain("")
    ui.log_plain(f"{ui.glyph('done')} Setup complete!")
    steps = "\n".join(f"{i}. {s.format(tool=cfg.tool)}" for i, s in enumerate(NEXT_STEPS, 1))
    ui.print_panel(steps, title="Next steps")
    ui.log_plain(f'{ui.glyph("tip")} Use "{cfg.tool} install --lts" to install the latest LTS version')


def run(
    cfg: SetupConfig,
    files: FileAccess,
    store: AutoRunStore,
    *,
    check: Callable[..., str] = check_tool,
) -> int:
    """Preflight, then PowerShell, then cmd.exe. Returns the process exit status."""
    session = ui.SetupSession(name="fnm setup")
    ui.log_plain(f"{ui.glyph('start')} Setting up {cfg.tool} for Windows...")
    if platform.system() != "Windows":
        ui.log_warning(f"Not running on Windows ({platform.system()}); AutoRun will need manual setup.")

    try:
        with session.phase("Preflight") as ph:
            version = check(cfg.tool, cfg.install_hint)
            ph.ok(f"{cfg.tool} is installed")
            ui.log_info(f"{cfg.tool} version: {version}")
    except MissingDependencyError as e:
        ui.log_error(str(e))
        ui.log_plain(f"   Please install {e.tool} first using: {e.install_hint}")
        return 1

    try:
        with session.phase("PowerShell profile") as ph:
            res = configure_powershell(cfg, files)
            ph.mark("ok" if res.changed else "warn", str(res.path))

        with session.phase("Command Prompt (cmd.exe)") as ph:
            cmd_res = configure_cmd(cfg, files, store)
            ph.mark("ok", f"init script {cmd_res.init_file}")
            ph.mark("ok" if cmd_res.status in (CONFIGURED, ALREADY) else "warn", f"AutoRun {cmd_res.status}")
    except Exception as e:
        debug_utils.write_debug(f"Setup aborted: {type(e).__name__}: {e}", channel="Error")
        _, failed = session.phases[-1]
        failed.fail("Error during setup", str(e))
        ui.print_run_summary(session)
        return 1

    ui.print_run_summary(session)
    _print_next_steps(cfg)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    ui.set_verbose(args.verbose)
    if args.verbose:
        debug_utils.set_console_verbosity("Information")

    try:
        cfg = load_config()
        store = make_store(cfg.registry_backend)
    except (ValueError, ImportError) as e:
        ui.log_error(f"Invalid configuration: {e}")
        return 1

    if cfg.log_dir:
        debug_utils.set_log_directory(cfg.log_dir)
    if args.log_file:
        log_path = debug_utils.enable_file_logging()
        ui.log_info(f"Logging to {log_path}")

    try:
        return run(cfg, LocalFiles(), store)
    finally:
        debug_utils.disable_file_logging()
