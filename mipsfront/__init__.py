"""Front-end helpers for a MIPS simulator: command-line options, console input, session settings and dialog input."""

__version__ = "0.1.0"

__all__ = [
    "console",
    "dialogs",
    "options",
    "session",
    "textutil",
]