# fnm_setup/templates.py
"""Generated shell text. Everything here is a pure function of the tool name and flags."""
from __future__ import annotations

from typing import Sequence

DEFAULT_FLAGS = ("--use-on-cd", "--corepack-enabled")

PROFILE_HEADER = "# fnm (Fast Node Manager)"


def marker(tool: str) -> str:
    """Substring whose presence means the profile was already configured."""
    return f"{tool} env"


def env_command(tool: str, shell: str, flags: Sequence[str] = DEFAULT_FLAGS) -> str:
    return " ".join([tool, "env", *flags, "--shell", shell])


def powershell_init_line(tool: str, flags: Sequence[str] = DEFAULT_FLAGS) -> str:
    return f"{env_command(tool, 'powershell', flags)} | Out-String | Invoke-Expression"


def profile_block(tool: str, flags: Sequence[str] = DEFAULT_FLAGS) -> str:
    return f"{PROFILE_HEADER}\n{powershell_init_line(tool, flags)}\n"


def cmd_init_script(tool: str, flags: Sequence[str] = DEFAULT_FLAGS) -> str:
    # for /F spawns a nested cmd, which would run AutoRun again without the guard
    return (
        "@echo off\n"
        ":: for /F will launch a new instance of cmd so we create a guard to prevent an infinite loop\n"
        "if not defined FNM_AUTORUN_GUARD (\n"
        '    set "FNM_AUTORUN_GUARD=AutorunGuard"\n'
        f"    FOR /f \"tokens=*\" %%z IN ('{env_command(tool, 'cmd', flags)}') DO CALL %%z\n"
        ")\n"
    )
