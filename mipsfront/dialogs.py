"""Input handling for the run and set-value dialogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

_LONG_MIN = -(1 << 31)
_LONG_MAX = (1 << 31) - 1
_ULONG_MAX = (1 << 32) - 1
_HEX_DIGITS = "0123456789abcdef"

_NAMED_TARGETS = ("status", "pc", "epc")


def _parse_c_integer(text: str, signed: bool) -> tuple[int, int]:
    """Read an integer with automatic base the way the C library does.

    Returns the value and the number of characters consumed; when no digits
    are found the value is 0 and nothing is consumed. Out-of-range values are
    clamped to the 32-bit limits of the result type.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    base = 10
    if (
        pos + 1 < length
        and text[pos] == "0"
        and text[pos + 1] in "xX"
        and pos + 2 < length
        and text[pos + 2].lower() in _HEX_DIGITS
    ):
        base = 16
        pos += 2
    elif pos < length and text[pos] == "0":
        base = 8

    allowed = _HEX_DIGITS[:base]
    start = pos
    while pos < length and text[pos].lower() in allowed:
        pos += 1
    if pos == start:
        return 0, 0

    magnitude = int(text[start:pos], base)
    if signed:
        value = -magnitude if negative else magnitude
        value = max(_LONG_MIN, min(_LONG_MAX, value))
    elif magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = (-magnitude if negative else magnitude) & _ULONG_MAX
    return value, pos


def parse_c_long(text: str) -> tuple[int, int]:
    """Parse a signed 32-bit integer with automatic base (0x hex, 0 octal).

    Returns ``(value, consumed)``. Trailing characters are left unread; when
    no digits are found the result is ``(0, 0)``. Values beyond the 32-bit
    range are clamped to its limits.
    """
    return _parse_c_integer(text, signed=True)


def choose_start_address(configured: int, default: int) -> int:
    """Return ``configured`` unless it is 0, in which case ``default``."""
    return configured if configured != 0 else default


def resolve_start_address(
    text: str, find_symbol: Callable[[str], Optional[int]]
) -> Optional[int]:
    """Turn the run dialog's address field into a start address.

    Empty text gives None, meaning the default address. Text starting with a
    digit is read as a number; anything else is looked up with
    ``find_symbol``. Raises ValueError when the result is address 0.
    """
    if not text:
        return None
    if text[0].isdigit():
        addr, _ = _parse_c_integer(text, signed=False)
    else:
        addr = find_symbol(text) or 0
    if addr == 0:
        raise ValueError(
            "Please enter an address or symbol at which to begin execution.\n"
            "Or, leave blank to begin at the default address."
        )
    return addr


@dataclass(frozen=True)
class SetValueTarget:
    """Where a value typed in the set-value dialog goes.

    ``kind`` is 'register', 'status', 'pc', 'epc' or 'memory'. ``number`` is
    the register number for a register, the address for memory, and None for
    the named special registers.
    """

    kind: str
    number: Optional[int] = None


def parse_set_value_target(
    text: str, register_number: Callable[[str], Optional[int]]
) -> SetValueTarget:
    """Work out what the set-value dialog's address field names.

    ``register_number`` maps a register name to its number, or to a negative
    number or None when it is not one. A leading '$' or 'r' is tried off as
    well. Raises ValueError for register 0 and for text that is neither a
    register, a special register nor a number.
    """
    name = text.lower()

    def lookup(candidate: str) -> int:
        number = register_number(candidate)
        return -1 if number is None else number

    reg_no = lookup(name)
    if reg_no < 0 and name[:1] in ("$", "r"):
        reg_no = lookup(name[1:])

    if reg_no == 0:
        raise ValueError("Cannot modify register 0.")
    if reg_no > 0:
        return SetValueTarget("register", reg_no)
    if name in _NAMED_TARGETS:
        return SetValueTarget(name)

    addr, consumed = _parse_c_integer(name, signed=False)
    if consumed == 0:
        raise ValueError("Please enter either a register name or a valid address.")
    return SetValueTarget("memory", addr)