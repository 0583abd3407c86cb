# mipsfront

`mipsfront` holds the pieces of a MIPS simulator's user front end that do not
depend on a window system. These include reading the command line, buffering
console input, keeping session settings and checking what the user types into
dialogs. It uses only the standard library.

## Modules

### `mipsfront.options`

`parse_command_line(args)` reads a list of arguments. Its first element is
the program name. It returns a `ParsedCommandLine` with three fields:

- `options`: a `SimulatorOptions` dataclass. It has the fields
  `bare_machine`, `accept_pseudo_insts`, `delayed_branches`, `delayed_loads`,
  `quiet`, `mapped_io`, `load_exception_handler` and `exception_file`. It also
  has the size and limit fields `text_size`, `data_size`, `data_limit`,
  `stack_size`, `stack_limit`, `k_text_size`, `k_data_size` and
  `k_data_limit`, which are `None` unless given.
- `files`: the assembly files to load.
- `warnings`: one message for each unknown flag. Each message includes the
  `USAGE` text.

Recognised switches, with their short forms:

- `-asm`/`-a` and `-bare`/`-b` select the extended or bare machine.
- `-delayed_branches`/`-db` and `-delayed_loads`/`-dl` turn on delayed
  branches and delayed loads.
- `-exception`/`-e` and `-noexception`/`-ne` turn loading of the exception
  handler on or off. `-trap`/`-t` and `-notrap`/`-nt` do the same.
- `-exception_file`/`-ef <file>` and `-trap_file`/`-tf <file>` name the
  exception handler file.
- `-mapped_io`/`-mio` and `-nomapped_io`/`-nmio` turn memory-mapped IO on or
  off.
- `-pseudo`/`-p` and `-nopseudo`/`-np` allow or refuse pseudo-instructions.
- `-quiet`/`-q` and `-noquiet`/`-nq` turn warnings off or on.
- `-stext`, `-sdata`, `-ldata`, `-sstack`, `-lstack`, `-sktext`, `-skdata`
  and `-lkdata` each take a number. Their short forms are `-st`, `-sd`,
  `-ld`, `-ss`, `-ls`, `-skt`, `-skd` and `-lkd`.
- `-file`/`-f <file> ...` names the files to load.

The first argument that does not start with `-` begins the list of files.
Empty file names are dropped. A number that cannot be read, or that lies
outside 32 bits, becomes 0. A switch that needs a value but comes last raises
`ValueError`.

### `mipsfront.console`

`ConsoleBuffer(echo=True)` models the simulated console.

- `key_release(text)` adds typed text to the input. It also echoes the text
  to the output when `echo` is set.
- `input_available()` tells whether unread input is waiting.
- `read_char()` returns the next character. It blocks until a key arrives.
  The buffer is thread-safe, and a second read made while another read is
  already waiting returns `"\n"`.
- `write_output(text)` appends text to the output, and the `output`
  property returns everything written so far.
- `clear()` discards both the output and any unread input.

`read_line(read_char, write_char, size)` reads at most `size - 1`
characters and echoes each one through `write_char`. It stops after a
newline, or when `read_char` returns an empty string. A negative `size`
raises `ValueError`.

### `mipsfront.session`

- `ProgramState` is an enum with the members `IDLE`, `STOPPED`, `PAUSED`,
  `RUNNING` and `SINGLESTEP`. `status_message(state)` gives the status-bar
  text for a state: `""`, `"Stopped"`, `"Paused"`, `"Running"` or
  `"Single Step"`.
- `MachineSettings` is a dataclass of machine flags. `apply_bare()` selects a
  bare machine: no pseudo-instructions, with delayed branches and loads.
  `apply_simple()` selects the opposite.
- `RecentFiles(limit=4)` keeps the most recently added path first and drops
  duplicates. Iterating over it yields at most `limit` paths.
- `normalize_display_base(base)` keeps 2, 10 or 16 and turns any other base
  into 16.
- `clamp_recent_files(length)` keeps a length in the range 1..20 and returns
  4 for anything else.
- `check_exception_file(path, load)` trims the path. When `load` is true and
  the file does not exist, it raises `FileNotFoundError`.

### `mipsfront.dialogs`

- `parse_c_long(text)` reads a signed 32-bit integer the way C's `strtol`
  does with base 0. A `0x` prefix means hex and a leading `0` means octal. It
  returns `(value, consumed)`. Values outside 32 bits are clamped to the
  limits.
- `choose_start_address(configured, default)` returns `default` when
  `configured` is 0, and `configured` otherwise.
- `resolve_start_address(text, find_symbol)` works out where execution
  starts. Empty text gives `None`, which means the default address. Text that
  starts with a digit is read as a number; any other text is passed to
  `find_symbol`. An address of 0 raises `ValueError`.
- `parse_set_value_target(text, register_number)` decides what a "set value"
  field names. It returns a `SetValueTarget` whose `kind` is `"register"`,
  `"status"`, `"pc"`, `"epc"` or `"memory"`. It raises `ValueError` for
  register 0 and for text that it cannot interpret.

### `mipsfront.textutil`

`make_crlf_valid(text)` turns every line break into CR LF. A CR LF pair is
kept and an LF CR pair becomes CR LF. Empty text gives `None`.

## Example

```python
from mipsfront.options import parse_command_line
from mipsfront.dialogs import parse_c_long, parse_set_value_target
from mipsfront.session import RecentFiles
from mipsfront.textutil import make_crlf_valid

parsed = parse_command_line(["spim", "-bare", "prog.s"])
print(parsed.options.bare_machine, parsed.files)   # True ['prog.s']

print(parse_c_long("0x1Fzz"))                       # (31, 4)

names = {"t0": 8}
print(parse_set_value_target("$t0", names.get))     # SetValueTarget(kind='register', number=8)

recent = RecentFiles(limit=2)
for path in ("a.s", "b.s", "a.s"):
    recent.add(path)
print(list(recent))                                 # ['a.s', 'b.s']

print(repr(make_crlf_valid("a\nb\r")))              # 'a\r\nb\r\n'
```

## What it does not do

This package does not assemble or execute MIPS code. It has no instruction
table and no memory or register model. It does not draw register, memory or
text-segment views. It provides no window and no command to run. It is meant
to be used by a program that supplies the simulator core and the user
interface.

## Requirements

Python 3.10 or later. The tests use pytest, which is available through the
`test` extra.