"""The simulated console: keyboard input buffer, output text and line reading."""

from __future__ import annotations

import threading
from typing import Callable


class ConsoleBuffer:
    """Holds typed characters until the program reads them, and the text written.

    With ``echo`` set, typed keys are also written to the output, as when
    memory-mapped IO is off.
    """

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self._input = ""
        self._output: list[str] = []
        self._waiting = False
        self._cond = threading.Condition()

    @property
    def output(self) -> str:
        """Everything written to the console since it was last cleared."""
        with self._cond:
            return "".join(self._output)

    def key_release(self, text: str) -> None:
        """Accept the text of a released key and wake a waiting reader."""
        if not text:
            return
        with self._cond:
            self._input += text
            if self.echo:
                self._output.append(text)
            self._cond.notify_all()

    def input_available(self) -> bool:
        """True if at least one typed character is waiting."""
        with self._cond:
            return len(self._input) > 0

    def read_char(self) -> str:
        """Return the next typed character, waiting for one if needed.

        A read made while another read is already waiting gives a newline.
        """
        with self._cond:
            if self._waiting:
                return "\n"
            self._waiting = True
            try:
                while not self._input:
                    self._cond.wait()
                first, self._input = self._input[0], self._input[1:]
                return first
            finally:
                self._waiting = False

    def write_output(self, text: str) -> None:
        """Append ``text`` to the console output."""
        with self._cond:
            self._output.append(text)

    def clear(self) -> None:
        """Discard both the output and any unread input."""
        with self._cond:
            self._output.clear()
            self._input = ""


def read_line(
    read_char: Callable[[], str],
    write_char: Callable[[str], None],
    size: int,
) -> str:
    """Read one line of at most ``size - 1`` characters, echoing each one.

    Reading stops after a newline, when the room is used up, or when
    ``read_char`` gives an empty string (a break). Raises ValueError for a
    negative size.
    """
    if size < 0:
        raise ValueError("Buffer size is null in read_string")
    chars: list[str] = []
    while size > 1:
        ch = read_char()
        if not ch:
            break
        chars.append(ch)
        size -= 1
        write_char(ch)
        if ch == "\n":
            break
    return "".join(chars)