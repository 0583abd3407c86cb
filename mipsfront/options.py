"""Command-line options of the simulator front end."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

USAGE = """Usage: QtSpim
\t-bare\t\t\tBare machine (no pseudo-ops, delayed branches and loads)
\t-asm\t\t\tExtended machine (pseudo-ops, no delayed branches and loads) (default)
\t-delayed_branches\tExecute delayed branches
\t-delayed_loads\t\tExecute delayed loads
\t-exception\t\tLoad exception handler (default)
\t-noexception\t\tDo not load exception handler
\t-exception_file <file>\tSpecify exception handler in place of default
\t-quiet\t\t\tDo not print warnings
\t-noquiet\t\tPrint warnings (default)
\t-mapped_io\t\tEnable memory-mapped IO
\t-nomapped_io\t\tDo not enable memory-mapped IO (default)
\t-file <file> ...\tAssembly code file(s)
\t
\tIf argument does not start with a '-', it and all subsequent arguments are file names.
"""


@dataclass
class SimulatorOptions:
    """Machine settings chosen on the command line.

    ``exception_file`` is None while the standard handler is in use. The size
    and limit fields are None unless given.
    """

    bare_machine: bool = False
    accept_pseudo_insts: bool = True
    delayed_branches: bool = False
    delayed_loads: bool = False
    quiet: bool = False
    mapped_io: bool = False
    load_exception_handler: bool = True
    exception_file: Optional[str] = None
    text_size: Optional[int] = None
    data_size: Optional[int] = None
    data_limit: Optional[int] = None
    stack_size: Optional[int] = None
    stack_limit: Optional[int] = None
    k_text_size: Optional[int] = None
    k_data_size: Optional[int] = None
    k_data_limit: Optional[int] = None


@dataclass
class ParsedCommandLine:
    """The options, the assembly files to load, and warnings for ignored arguments."""

    options: SimulatorOptions = field(default_factory=SimulatorOptions)
    files: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


_SIZE_FLAGS = {
    "-stext": "text_size",
    "-st": "text_size",
    "-sdata": "data_size",
    "-sd": "data_size",
    "-ldata": "data_limit",
    "-ld": "data_limit",
    "-sstack": "stack_size",
    "-ss": "stack_size",
    "-lstack": "stack_limit",
    "-ls": "stack_limit",
    "-sktext": "k_text_size",
    "-skt": "k_text_size",
    "-skdata": "k_data_size",
    "-skd": "k_data_size",
    "-lkdata": "k_data_limit",
    "-lkd": "k_data_limit",
}

_BOOL_FLAGS = {
    "-delayed_branches": ("delayed_branches", True),
    "-db": ("delayed_branches", True),
    "-delayed_loads": ("delayed_loads", True),
    "-dl": ("delayed_loads", True),
    "-exception": ("load_exception_handler", True),
    "-e": ("load_exception_handler", True),
    "-noexception": ("load_exception_handler", False),
    "-ne": ("load_exception_handler", False),
    "-trap": ("load_exception_handler", True),
    "-t": ("load_exception_handler", True),
    "-notrap": ("load_exception_handler", False),
    "-nt": ("load_exception_handler", False),
    "-mapped_io": ("mapped_io", True),
    "-mio": ("mapped_io", True),
    "-nomapped_io": ("mapped_io", False),
    "-nmio": ("mapped_io", False),
    "-pseudo": ("accept_pseudo_insts", True),
    "-p": ("accept_pseudo_insts", True),
    "-nopseudo": ("accept_pseudo_insts", False),
    "-np": ("accept_pseudo_insts", False),
    "-quiet": ("quiet", True),
    "-q": ("quiet", True),
    "-noquiet": ("quiet", False),
    "-nq": ("quiet", False),
}

_FILE_FLAGS = {"-exception_file", "-ef", "-trap_file", "-tf"}


def _to_int(text: str) -> int:
    """Read a decimal integer; anything unreadable or outside 32 bits gives 0."""
    try:
        value = int(text.strip(), 10)
    except ValueError:
        return 0
    if not -(1 << 31) <= value < (1 << 31):
        return 0
    return value


def parse_command_line(args: Sequence[str]) -> ParsedCommandLine:
    """Parse ``args``, whose first element is the program name.

    Unknown flags are ignored with a warning. The first argument not starting
    with '-', or everything after ``-file``, names the files to load. Raises
    ValueError when a flag that takes a value is the last argument.
    """
    result = ParsedCommandLine()
    opts = result.options
    items = list(args)

    def value_after(i: int) -> str:
        if i + 1 >= len(items):
            raise ValueError(f"missing value after {items[i]}")
        return items[i + 1]

    i = 1
    while i < len(items):
        arg = items[i]
        if arg in ("-asm", "-a"):
            opts.bare_machine = False
            opts.delayed_branches = False
            opts.delayed_loads = False
        elif arg in ("-bare", "-b"):
            opts.bare_machine = True
            opts.delayed_branches = True
            opts.delayed_loads = True
            opts.quiet = True
        elif arg in _BOOL_FLAGS:
            name, flag = _BOOL_FLAGS[arg]
            setattr(opts, name, flag)
        elif arg in _FILE_FLAGS:
            path = value_after(i)
            i += 1
            opts.load_exception_handler = True
            if path:
                opts.exception_file = path
        elif arg in _SIZE_FLAGS:
            setattr(opts, _SIZE_FLAGS[arg], _to_int(value_after(i)))
            i += 1
        elif arg in ("-file", "-f"):
            result.files = [f for f in items[i + 1:] if f]
            return result
        elif not arg.startswith("-"):
            result.files = [f for f in items[i:] if f]
            return result
        else:
            result.warnings.append(f"Unknown argument: {arg} (ignored)\n\n{USAGE}")
        i += 1
    return result