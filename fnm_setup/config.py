# fnm_setup/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

REGISTRY_BACKENDS = ("reg", "winreg")

PROFILE_FILENAME = "Microsoft.PowerShell_profile.ps1"


@dataclass(frozen=True)
class SetupConfig:
    """
    Every fixed string and path the setup run touches.

    Defaults reproduce the stock fnm-on-Windows layout:
        <home>/Documents/WindowsPowerShell/...profile.ps1   (Windows PowerShell 5.x, preferred)
        <home>/Documents/PowerShell/...profile.ps1          (PowerShell 6+/pwsh)
        <home>/fnm_init.cmd                                 (cmd.exe AutoRun target)
    """
    home: Path = field(default_factory=Path.home)
    tool: str = "fnm"
    env_flags: Tuple[str, ...] = ("--use-on-cd", "--corepack-enabled")
    install_hint: str = "choco install fnm"
    autorun_key: str = r"HKCU\Software\Microsoft\Command Processor"
    autorun_name: str = "AutoRun"
    init_script_name: str = "fnm_init.cmd"
    registry_backend: str = "reg"
    log_dir: Optional[str] = None

    @property
    def windows_powershell_profile(self) -> Path:
        return self.home / "Documents" / "WindowsPowerShell" / PROFILE_FILENAME

    @property
    def pwsh_profile(self) -> Path:
        return self.home / "Documents" / "PowerShell" / PROFILE_FILENAME

    @property
    def profile_candidates(self) -> Tuple[Path, Path]:
        return self.windows_powershell_profile, self.pwsh_profile

    @property
    def cmd_init_file(self) -> Path:
        return self.home / self.init_script_name

    @property
    def autorun_location(self) -> str:
        """Full registry path shown in manual instructions."""
        return f"{self.autorun_key}\\{self.autorun_name}"


def load_config(environ: Optional[Mapping[str, str]] = None, home: Optional[Path] = None) -> SetupConfig:
    """Build a SetupConfig, applying FNM_SETUP_* overrides from the environment."""
    env = os.environ if environ is None else environ
    backend = (env.get("FNM_SETUP_REGISTRY") or "reg").strip().lower()
    if backend not in REGISTRY_BACKENDS:
        raise ValueError(
            f"Invalid FNM_SETUP_REGISTRY '{backend}'. Must be one of {', '.join(REGISTRY_BACKENDS)}"
        )
    kwargs = {"registry_backend": backend}
    if home is not None:
        kwargs["home"] = Path(home)
    tool = (env.get("FNM_SETUP_TOOL") or "").strip()
    if tool:
        kwargs["tool"] = tool
    if env.get("FNM_SETUP_LOG_DIR"):
        kwargs["log_dir"] = env["FNM_SETUP_LOG_DIR"]
    return SetupConfig(**kwargs)
