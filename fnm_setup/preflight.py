# fnm_setup/preflight.py
from __future__ import annotations

import shutil
import subprocess
from typing import Callable

from .debug_utils import write_debug


class MissingDependencyError(Exception):
    """The version manager could not be run; the user has to install it first."""

    def __init__(self, tool: str, install_hint: str):
        super().__init__(f"{tool} is not installed or not in PATH")
        self.tool = tool
        self.install_hint = install_hint


def check_tool(tool: str, install_hint: str = "", runner: Callable[..., subprocess.CompletedProcess] = subprocess.run) -> str:
    """
    Run `<tool> --version`. Returns the reported version text.
    Raises MissingDependencyError if the executable is missing or exits non-zero.
    """
    exe = shutil.which(tool) or tool
    try:
        cp = runner([exe, "--version"], capture_output=True, text=True)
    except OSError as e:
        write_debug(f"{tool} --version could not start: {e}", channel="Debug")
        raise MissingDependencyError(tool, install_hint) from e
    if cp.returncode != 0:
        write_debug(f"{tool} --version exited with {cp.returncode}", channel="Debug")
        raise MissingDependencyError(tool, install_hint)
    return (cp.stdout or "").strip()
