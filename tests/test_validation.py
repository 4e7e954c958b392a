import pytest

from galton.sim.validation import (
    InputError, SimParams, parse_balls, parse_capacity, parse_params, parse_rows,
)


def test_valid_params():
    assert parse_params("12", "200", "50") == SimParams(12, 200, 50)
    assert parse_params(1, 5000, 1000) == SimParams(1, 5000, 1000)


@pytest.mark.parametrize("raw", ["0", "31", "-1", "", "abc", None])
def test_rows_out_of_range(raw):
    with pytest.raises(InputError, match="rows"):
        parse_rows(raw)


@pytest.mark.parametrize("raw", ["0", "5001", "x", None])
def test_balls_out_of_range(raw):
    with pytest.raises(InputError, match="balls"):
        parse_balls(raw)


@pytest.mark.parametrize("raw", [0, "1001", "-5"])
def test_capacity_out_of_range(raw):
    with pytest.raises(InputError, match="capacity"):
        parse_capacity(raw)


@pytest.mark.parametrize("raw", ["", "  ", None, "lots"])
def test_capacity_defaults_when_blank_or_not_a_number(raw):
    assert parse_capacity(raw) == 100


def test_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_params("12", "0", "10")


def test_whitespace_is_ignored():
    assert parse_rows(" 7 ") == 7
