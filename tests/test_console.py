import threading

import pytest

from mipsfront.console import ConsoleBuffer, read_line


def test_key_release_echoes_when_enabled():
    con = ConsoleBuffer(echo=True)
    con.key_release("a")
    assert con.output == "a"
    assert con.input_available() is True


def test_key_release_without_echo():
    con = ConsoleBuffer(echo=False)
    con.key_release("a")
    assert con.output == ""
    assert con.input_available() is True


def test_empty_key_ignored():
    con = ConsoleBuffer()
    con.key_release("")
    assert con.input_available() is False


def test_read_char_in_order():
    con = ConsoleBuffer()
    con.key_release("h")
    con.key_release("i")
    assert con.read_char() == "h"
    assert con.read_char() == "i"
    assert con.input_available() is False


def test_read_char_waits_for_key():
    con = ConsoleBuffer()
    timer = threading.Timer(0.05, con.key_release, args=("z",))
    timer.start()
    try:
        assert con.read_char() == "z"
    finally:
        timer.join()


def test_write_output_and_clear():
    con = ConsoleBuffer()
    con.write_output("hello ")
    con.write_output("world")
    con.key_release("k")
    assert con.output == "hello worldk"
    con.clear()
    assert con.output == ""
    assert con.input_available() is False


def test_read_line_stops_at_newline():
    chars = iter("ab\ncd")
    echoed = []
    line = read_line(lambda: next(chars), echoed.append, 100)
    assert line == "ab\n"
    assert "".join(echoed) == line


def test_read_line_limited_by_size():
    chars = iter("abcdef")
    line = read_line(lambda: next(chars), lambda c: None, 4)
    assert line == "abc"


def test_read_line_stops_on_break():
    chars = iter(["x", ""])
    assert read_line(lambda: next(chars), lambda c: None, 10) == "x"


def test_read_line_small_sizes_read_nothing():
    def never():
        raise AssertionError("should not read")

    assert read_line(never, lambda c: None, 1) == ""
    assert read_line(never, lambda c: None, 0) == ""


def test_read_line_negative_size():
    with pytest.raises(ValueError):
        read_line(lambda: "a", lambda c: None, -1)


def test_read_line_from_console_buffer():
    con = ConsoleBuffer(echo=False)
    for ch in "ok\n":
        con.key_release(ch)
    line = read_line(con.read_char, con.write_output, 20)
    assert line == "ok\n"
    assert con.output == "ok\n"