"""Card expiry date helpers"""

import re
from typing import Tuple

EXPIRY_DATE_PATTERN = re.compile(r"^([0-9]{1,2})/([0-9]{4})$")


def parse_expiry_date(expiry_date: str) -> Tuple[int, int]:
    """
    Split an expiry date string into (month, year).

    Accepts "M/YYYY" and "MM/YYYY". Range checks on the month are left to
    the validator so the caller gets a specific rejection reason.

    Raises:
        ValueError: If the string is not two numeric parts separated by "/"
    """
    match = EXPIRY_DATE_PATTERN.match(expiry_date.strip())
    if not match:
        raise ValueError("Invalid expiry date format. Expected MM/YYYY")
    return int(match.group(1)), int(match.group(2))


def format_expiry_date(month: int, year: int) -> str:
    """Render month and year as MM/YYYY with the month zero-padded"""
    return f"{month:02d}/{year:04d}"