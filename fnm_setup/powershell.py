# fnm_setup/powershell.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import standard_ui as ui
from .config import SetupConfig
from .debug_utils import write_debug
from .files import FileAccess
from .templates import marker, profile_block


@dataclass(frozen=True)
class ProfileResult:
    path: Path
    changed: bool


def resolve_profile_path(cfg: SetupConfig, files: FileAccess) -> Path:
    """
    Prefer the Windows PowerShell profile; use the pwsh one only when it exists
    and the Windows PowerShell one does not.
    """
    first, second = cfg.profile_candidates
    if not files.exists(first) and files.exists(second):
        return second
    return first


def configure_powershell(cfg: SetupConfig, files: FileAccess) -> ProfileResult:
    """Append the fnm init block to the PowerShell profile unless it is already there."""
    profile_path = resolve_profile_path(cfg, files)
    write_debug(f"PowerShell profile resolved to {profile_path}", channel="Debug")

    content = ""
    if files.exists(profile_path):
        content = files.read_text(profile_path)
        if marker(cfg.tool) in content:
            ui.log_warning(f"PowerShell profile already contains {cfg.tool} configuration")
            ui.log_detail(f"Profile location: {profile_path}")
            return ProfileResult(profile_path, changed=False)
    else:
        files.make_dirs(profile_path.parent)

    block = profile_block(cfg.tool, cfg.env_flags)
    new_content = f"{content}\n\n{block}" if content else block
    files.write_text(profile_path, new_content)

    ui.log_success("PowerShell profile configured")
    ui.log_detail(f"Profile location: {profile_path}")
    return ProfileResult(profile_path, changed=True)
