import pytest

from pairs.errors import InvalidDimension
from pairs.utils.difficulty import parse_dimension, validate_dimension


@pytest.mark.parametrize("raw, expected", [(2, 2), ("4", 4), (" 6 ", 6), (8, 8)])
def test_parse_dimension_accepts_even_values(raw, expected):
    assert parse_dimension(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "3", 5, 0, -4, None, 4.0, False])
def test_parse_dimension_rejects(raw):
    with pytest.raises(InvalidDimension):
        parse_dimension(raw)


def test_validate_dimension_does_not_parse_strings():
    with pytest.raises(InvalidDimension):
        validate_dimension("4")
