"""
standard_ui.py

Console output for fnm_setup, built on Rich. Provides:
  - Logging helpers: log_info, log_warning, log_error, log_success.
  - A section context manager that prints a header/footer with elapsed time.
  - print_panel for the closing "next steps" block.
  - A small session/phase model so the setup run ends with a compact summary.

Glyphs degrade to ASCII on legacy Windows consoles (or FORCE_ASCII_UI=1).
"""

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.step": "white",
        "ui.success": "green bold",
        "ui.warn": "yellow bold",
        "ui.error": "red bold",
        "ui.header": "bold blue",
        "ui.dim": "dim",
        "ui.elapsed": "magenta",
    }
)

# soft_wrap keeps long Windows paths on one line
console = Console(theme=_THEME, highlight=False, soft_wrap=True, emoji=False)


def _needs_ascii_ui() -> bool:
    if os.environ.get("FORCE_ASCII_UI") == "1":
        return True
    enc = (getattr(sys.stdout, "encoding", "") or "").upper()
    return os.name == "nt" and "UTF-8" not in enc


_GLYPHS = {
    "info": ("ℹ ", "[i]"),
    "ok": ("✅", "[OK]"),
    "warn": ("⚠️ ", "[WARN]"),
    "error": ("❌", "[ERROR]"),
    "file": ("📄", "->"),
    "edit": ("📝", "*"),
    "start": ("🚀", ">>"),
    "done": ("✨", "**"),
    "tip": ("💡", "Tip:"),
}


def glyph(name: str) -> str:
    fancy, plain = _GLYPHS[name]
    return plain if _needs_ascii_ui() else fancy


# ---------- Global State ----------

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


# ---------- Basic Logging ----------


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        console.print(f"[ui.info]{glyph('info')} {escape(message)}[/]")


def log_warning(message: str) -> None:
    console.print(f"[ui.warn]{glyph('warn')} {escape(message)}[/]")


def log_error(message: str) -> None:
    console.print(f"[ui.error]{glyph('error')} {escape(message)}[/]")


def log_success(message: str) -> None:
    console.print(f"[ui.success]{glyph('ok')} {escape(message)}[/]")


def log_detail(message: str, icon: str = "file") -> None:
    """Indented follow-up line under a step (profile location, manual hints)."""
    console.print(f"   {glyph(icon)} {escape(message)}")


def log_plain(message: str = "") -> None:
    console.print(escape(message))


# ---------- Sections ----------


@contextmanager
def section(title: str):
    """
    Prints a bold header before the body and a concise footer with per-section elapsed after.
    """
    start = time.time()
    console.rule(f"[ui.header]{escape(title)}[/]")
    try:
        yield
    finally:
        elapsed = time.time() - start
        console.print(f"[ui.dim]({title}: [ui.elapsed]{elapsed:.2f}s[/ui.elapsed])[/]")


def print_panel(message: str, title: str = "", style: str = "green") -> None:
    console.print(Panel(escape(message), title=title, style=style, expand=False))


# ---------- Compact Phases & Summary ----------


@dataclass
class StepRecord:
    message: str
    status: str  # "ok", "warn", "fail"
    detail: Optional[str] = None


@dataclass
class Phase:
    """Collects step outcomes within a section."""

    title: str
    _steps: List[StepRecord] = field(default_factory=list)

    def mark(self, status: str, message: str, detail: Optional[str] = None) -> None:
        """Record an outcome that was already printed by the step itself."""
        self._steps.append(StepRecord(message, status, detail))

    def ok(self, message: str) -> None:
        self._steps.append(StepRecord(message, "ok"))
        log_success(message)

    def fail(self, message: str, detail: Optional[str] = None) -> None:
        self._steps.append(StepRecord(message, "fail", detail))
        tail = f": {detail}" if detail else ""
        log_error(f"{message}{tail}")

    def counts(self) -> Tuple[int, int, int]:
        oks = sum(s.status == "ok" for s in self._steps)
        warns = sum(s.status == "warn" for s in self._steps)
        fails = sum(s.status == "fail" for s in self._steps)
        return oks, warns, fails


@dataclass
class SetupSession:
    """Top-level run collector; use for a clean summary at the end."""

    name: str = "Setup"
    phases: List[Tuple[str, Phase]] = field(default_factory=list)
    _start: float = field(default_factory=time.time)

    @contextmanager
    def phase(self, title: str):
        with section(title):
            p = Phase(title)
            try:
                yield p
            finally:
                self.phases.append((title, p))

    def totals(self) -> Tuple[int, int, int]:
        ok = warn = fail = 0
        for _, ph in self.phases:
            o, w, f = ph.counts()
            ok, warn, fail = ok + o, warn + w, fail + f
        return ok, warn, fail


def print_run_summary(session: SetupSession) -> None:
    """Render the per-phase OK/Warn/Fail table."""
    console.rule(f"[ui.header]{escape(session.name)} Summary[/]")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Phase")
    table.add_column("OK", justify="right")
    table.add_column("Warn", justify="right")
    table.add_column("Fail", justify="right")
    for title, ph in session.phases:
        ok, warn, fail = ph.counts()
        table.add_row(
            escape(title),
            f"[ui.success]{ok}[/]",
            f"[ui.warn]{warn}[/]" if warn else "0",
            f"[ui.error]{fail}[/]" if fail else "0",
        )
    console.print(table)
    elapsed = time.time() - session._start
    _, total_warn, _ = session.totals()
    if total_warn:
        console.print(
            f"[ui.warn]{escape(session.name)} completed with {total_warn} warning(s).[/] [ui.dim](Elapsed {elapsed:.2f}s)[/]"
        )
    else:
        console.print(f"[ui.dim](Elapsed {elapsed:.2f}s)[/]")
