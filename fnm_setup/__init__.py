# __init__.py

"""Configure PowerShell and Command Prompt to initialise fnm (Fast Node Manager)."""

__version__ = "0.1.0"

from .config import SetupConfig, load_config
from .files import FileAccess, LocalFiles
from .registry import AutoRunStore, RegExeStore, WinregStore, RegistryWriteError, make_store
from .preflight import MissingDependencyError, check_tool
from .powershell import configure_powershell, resolve_profile_path
from .cmd_autorun import configure_cmd, compose_autorun

__all__ = [
    "SetupConfig",
    "load_config",
    "FileAccess",
    "LocalFiles",
    "AutoRunStore",
    "RegExeStore",
    "WinregStore",
    "RegistryWriteError",
    "make_store",
    "MissingDependencyError",
    "check_tool",
    "configure_powershell",
    "resolve_profile_path",
    "configure_cmd",
    "compose_autorun",
]
