"""Simulator session state: run status, machine settings and recent files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

DEFAULT_RECENT_FILES = 4
MAX_RECENT_FILES = 20


class ProgramState(Enum):
    """What the simulated program is doing."""

    IDLE = "idle"
    STOPPED = "stopped"
    PAUSED = "paused"
    RUNNING = "running"
    SINGLESTEP = "singlestep"


_STATUS_MESSAGES = {
    ProgramState.IDLE: "",
    ProgramState.STOPPED: "Stopped",
    ProgramState.PAUSED: "Paused",
    ProgramState.RUNNING: "Running",
    ProgramState.SINGLESTEP: "Single Step",
}


def status_message(state: ProgramState) -> str:
    """Return the status-bar text for ``state``; an unknown state gives '?'."""
    return _STATUS_MESSAGES.get(state, "?")


@dataclass
class MachineSettings:
    """Settings of the simulated machine, with their usual defaults."""

    bare_machine: bool = False
    accept_pseudo_insts: bool = True
    delayed_branches: bool = False
    delayed_loads: bool = False
    mapped_io: bool = True
    quiet: bool = False
    load_exception_handler: bool = True
    exception_file: Optional[str] = None

    def apply_bare(self) -> None:
        """Switch to a bare machine: no pseudo-instructions, delayed branches and loads."""
        self.bare_machine = True
        self.accept_pseudo_insts = False
        self.delayed_branches = True
        self.delayed_loads = True

    def apply_simple(self) -> None:
        """Switch to the simple machine: pseudo-instructions, no delays."""
        self.bare_machine = False
        self.accept_pseudo_insts = True
        self.delayed_branches = False
        self.delayed_loads = False


class RecentFiles:
    """Recently loaded files, most recent first, shown up to ``limit`` entries."""

    def __init__(self, limit: int = DEFAULT_RECENT_FILES) -> None:
        self.limit = limit
        self._paths: list[str] = []

    def add(self, path: str) -> None:
        """Put ``path`` first, removing any earlier occurrence of it."""
        self._paths = [path] + [p for p in self._paths if p != path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths[: max(self.limit, 0)])


def normalize_display_base(base: int) -> int:
    """Return ``base`` if it is 2, 10 or 16; any other base falls back to 16."""
    return base if base in (2, 10, 16) else 16


def clamp_recent_files(length: int) -> int:
    """Return ``length`` if it lies in 1..20, else the default of 4."""
    if length <= 0 or length > MAX_RECENT_FILES:
        return DEFAULT_RECENT_FILES
    return length


def check_exception_file(path: str, load: bool) -> str:
    """Return ``path`` trimmed of surrounding whitespace.

    When ``load`` is set the file must exist; otherwise FileNotFoundError is raised.
    """
    trimmed = path.strip()
    if load and not os.path.exists(trimmed):
        raise FileNotFoundError(
            "The specified exception file does not exist.\n\n"
            "Please specify an existing file, or turn off exception file loading."
        )
    return trimmed