import pytest

from mipsfront.dialogs import (
    SetValueTarget,
    choose_start_address,
    parse_c_long,
    parse_set_value_target,
    resolve_start_address,
)

_REGISTERS = {"zero": 0, "0": 0, "5": 5, "t0": 8, "sp": 29}


def _register_number(name):
    return _REGISTERS.get(name, -1)


def _symbols(name):
    return {"main": 0x00400024, "start": 0x00400000}.get(name, 0)


@pytest.mark.parametrize("n", [0, 7, 42, 12345, 2147483647])
def test_parse_c_long_decimal_round_trip(n):
    text = str(n)
    assert parse_c_long(text) == (n, len(text))


@pytest.mark.parametrize("n", [1, 31, 255, 0x1234ABCD])
def test_parse_c_long_hex_round_trip(n):
    text = hex(n)
    assert parse_c_long(text) == (n, len(text))


@pytest.mark.parametrize("n", [1, 8, 511])
def test_parse_c_long_octal_round_trip(n):
    text = "0" + format(n, "o")
    assert parse_c_long(text) == (n, len(text))


def test_parse_c_long_negative_with_trailing_text():
    assert parse_c_long(" -5xyz") == (-5, 3)


def test_parse_c_long_no_digits():
    assert parse_c_long("abc") == (0, 0)
    assert parse_c_long("") == (0, 0)


def test_parse_c_long_bare_hex_prefix_stops_at_x():
    assert parse_c_long("0x") == (0, 1)


def test_parse_c_long_clamps_overflow():
    value, consumed = parse_c_long("0xffffffff")
    assert value == (1 << 31) - 1
    assert consumed == 10
    assert parse_c_long("-99999999999")[0] == -(1 << 31)


def test_choose_start_address():
    assert choose_start_address(0, 0x00400000) == 0x00400000
    assert choose_start_address(0x00400024, 0x00400000) == 0x00400024


def test_resolve_start_address_empty_means_default():
    assert resolve_start_address("", _symbols) is None


def test_resolve_start_address_number():
    assert resolve_start_address("0x00400024", _symbols) == 0x00400024
    assert resolve_start_address("4194304", _symbols) == 4194304


def test_resolve_start_address_symbol():
    assert resolve_start_address("main", _symbols) == 0x00400024


def test_resolve_start_address_unknown_symbol_raises():
    with pytest.raises(ValueError, match="Please enter an address or symbol"):
        resolve_start_address("nowhere", _symbols)


def test_resolve_start_address_zero_raises():
    with pytest.raises(ValueError):
        resolve_start_address("0", _symbols)


def test_resolve_start_address_none_from_lookup_raises():
    with pytest.raises(ValueError):
        resolve_start_address("x", lambda name: None)


def test_set_value_register_by_name():
    assert parse_set_value_target("T0", _register_number) == SetValueTarget("register", 8)


def test_set_value_register_with_prefix():
    assert parse_set_value_target("$sp", _register_number) == SetValueTarget("register", 29)
    assert parse_set_value_target("r5", _register_number) == SetValueTarget("register", 5)


def test_set_value_register_zero_raises():
    with pytest.raises(ValueError, match="Cannot modify register 0."):
        parse_set_value_target("$zero", _register_number)
    with pytest.raises(ValueError, match="Cannot modify register 0."):
        parse_set_value_target("r0", _register_number)


@pytest.mark.parametrize("name", ["status", "PC", "Epc"])
def test_set_value_named_registers(name):
    target = parse_set_value_target(name, _register_number)
    assert target == SetValueTarget(name.lower())
    assert target.number is None


def test_set_value_memory_address():
    target = parse_set_value_target("0x10010000", _register_number)
    assert target == SetValueTarget("memory", 0x10010000)


def test_set_value_bad_text_raises():
    with pytest.raises(ValueError, match="register name or a valid address"):
        parse_set_value_target("bogus", _register_number)


def test_set_value_register_lookup_may_give_none():
    target = parse_set_value_target("0x10", lambda name: None)
    assert target == SetValueTarget("memory", 0x10)