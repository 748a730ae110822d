"""Unit tests for expiry date helpers"""

import pytest
from payment_gateway.utils.date_utils import format_expiry_date, parse_expiry_date


@pytest.mark.parametrize(
    "value,expected",
    [
        ("12/2099", (12, 2099)),
        ("01/2020", (1, 2020)),
        ("4/2030", (4, 2030)),
        (" 04/2030 ", (4, 2030)),
        ("13/2030", (13, 2030)),  # range is checked by the validator
    ],
)
def test_parse_expiry_date(value: str, expected):
    assert parse_expiry_date(value) == expected


@pytest.mark.parametrize("value", ["", "12", "12-2030", "12/30", "ab/2030", "12/2030/1", "/2030"])
def test_parse_expiry_date_rejects_bad_format(value: str):
    with pytest.raises(ValueError, match="MM/YYYY"):
        parse_expiry_date(value)


def test_format_expiry_date_zero_pads_month():
    assert format_expiry_date(3, 2030) == "03/2030"
    assert format_expiry_date(11, 2030) == "11/2030"


@pytest.mark.parametrize("value", ["١٢/٢٠٩٩", "１２/２０９９", "12/２０９９"])
def test_parse_expiry_date_rejects_non_ascii_digits(value: str):
    with pytest.raises(ValueError, match="MM/YYYY"):
        parse_expiry_date(value)
