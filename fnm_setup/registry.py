# fnm_setup/registry.py
"""
Per-user AutoRun storage.

Two backends behind one small interface:
  - RegExeStore: shells out to reg.exe (query/add), parsing the query table.
  - WinregStore: talks to the registry directly through winreg.

A value that is not set is reported as None; only writes raise.
"""
from __future__ import annotations

import os
import re
import subprocess
from typing import Callable, Optional, Tuple

from .debug_utils import write_debug

HIVES = {
    "HKCU": "HKEY_CURRENT_USER",
    "HKEY_CURRENT_USER": "HKEY_CURRENT_USER",
}


class RegistryWriteError(Exception):
    """Raised when the AutoRun value cannot be written (permissions, missing reg.exe, ...)."""

    def __init__(self, key: str, name: str, reason: str):
        super().__init__(f"Could not write {key}\\{name}: {reason}")
        self.key = key
        self.name = name
        self.reason = reason


class AutoRunStore:
    def query(self, key: str, name: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, name: str, value: str) -> None:
        raise NotImplementedError


Runner = Callable[..., subprocess.CompletedProcess]


def parse_reg_query(output: str, name: str) -> Optional[str]:
    """
    Pull the data column for `name` out of `reg query` output, e.g.

        HKEY_CURRENT_USER\\Software\\Microsoft\\Command Processor
            AutoRun    REG_SZ    C:\\Users\\me\\fnm_init.cmd
    """
    pattern = rf"^\s*{re.escape(name)}\s+REG_(?:EXPAND_)?SZ(?:[ \t]+(.*))?$"
    match = re.search(pattern, output or "", flags=re.MULTILINE | re.IGNORECASE)
    if not match:
        return None
    return (match.group(1) or "").strip()


def console_encoding() -> str:
    """reg.exe writes redirected output in the OEM code page, not UTF-8."""
    return "oem" if os.name == "nt" else "utf-8"


class RegExeStore(AutoRunStore):
    def __init__(self, runner: Runner = subprocess.run, encoding: Optional[str] = None):
        self._run = runner
        self._encoding = encoding or console_encoding()

    def _call(self, cmd: list) -> Tuple[int, str, str]:
        cp = self._run(cmd, capture_output=True, text=True, encoding=self._encoding, errors="replace")
        return cp.returncode, cp.stdout or "", cp.stderr or ""

    def query(self, key: str, name: str) -> Optional[str]:
        try:
            rc, out, err = self._call(["reg", "query", key, "/v", name])
        except OSError as e:
            write_debug(f"reg query unavailable: {e}", channel="Debug")
            return None
        if rc != 0:
            write_debug(f"reg query {key} /v {name} -> {rc}: {err.strip()}", channel="Debug")
            return None
        return parse_reg_query(out, name)

    def set(self, key: str, name: str, value: str) -> None:
        cmd = ["reg", "add", key, "/v", name, "/t", "REG_SZ", "/d", value, "/f"]
        try:
            rc, _, err = self._call(cmd)
        except OSError as e:
            raise RegistryWriteError(key, name, str(e)) from e
        if rc != 0:
            raise RegistryWriteError(key, name, err.strip() or f"reg add exited with code {rc}")
        write_debug(f"reg add {key} /v {name} = {value!r}", channel="Debug")


def _split_key(key: str) -> Tuple[str, str]:
    hive, _, sub = key.partition("\\")
    if hive.upper() not in HIVES:
        raise ValueError(f"Unsupported hive in '{key}'; only HKCU is allowed")
    return HIVES[hive.upper()], sub


class WinregStore(AutoRunStore):
    """Direct registry access; Windows only."""

    def __init__(self, winreg_module=None):
        if winreg_module is None:
            import winreg as winreg_module
        self._winreg = winreg_module

    def query(self, key: str, name: str) -> Optional[str]:
        hive, sub = _split_key(key)
        wr = self._winreg
        try:
            with wr.OpenKey(getattr(wr, hive), sub, 0, wr.KEY_READ) as k:
                val, _ = wr.QueryValueEx(k, name)
        except FileNotFoundError:
            return None
        except OSError as e:
            write_debug(f"winreg query {key}\\{name} failed: {e}", channel="Debug")
            return None
        return str(val)

    def set(self, key: str, name: str, value: str) -> None:
        hive, sub = _split_key(key)
        wr = self._winreg
        try:
            with wr.CreateKeyEx(getattr(wr, hive), sub, 0, wr.KEY_SET_VALUE) as k:
                wr.SetValueEx(k, name, 0, wr.REG_SZ, value)
        except OSError as e:
            raise RegistryWriteError(key, name, str(e)) from e
        write_debug(f"winreg set {key}\\{name} = {value!r}", channel="Debug")


def make_store(backend: str = "reg") -> AutoRunStore:
    if backend == "reg":
        return RegExeStore()
    if backend == "winreg":
        return WinregStore()
    raise ValueError(f"Unknown registry backend: {backend}")
