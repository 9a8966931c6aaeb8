import pytest

from clubsim.timefmt import format_time, parse_count, parse_time


@pytest.mark.parametrize("text", ["00:00", "09:05", "12:30", "23:59"])
def test_round_trip(text):
    assert format_time(parse_time(text)) == text


def test_parse_time_value():
    assert parse_time("09:00") == 540


def test_format_zero():
    assert format_time(0) == "00:00"


def test_format_beyond_a_day():
    assert format_time(1500) == "25:00"


def test_parse_time_is_ordered():
    assert parse_time("08:59") < parse_time("09:00") < parse_time("19:00")


@pytest.mark.parametrize(
    "text", ["24:00", "12:60", "9:00", "09:000", "12-30", "ab:cd", "", "-1:30"]
)
def test_parse_time_rejects(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_parse_count_plain():
    assert parse_count("7") == 7


def test_parse_count_ignores_trailing_text():
    assert parse_count("12abc") == 12


def test_parse_count_accepts_zero():
    assert parse_count("0") == 0


@pytest.mark.parametrize("text", ["-1", "abc", "", "99999999999"])
def test_parse_count_rejects(text):
    with pytest.raises(ValueError):
        parse_count(text)