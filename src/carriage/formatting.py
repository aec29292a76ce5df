"""Address, phone number and date-range helpers shared by models and services."""

import re
from datetime import date

from carriage.errors import ValidationError

_WHITESPACE = re.compile(r"\s+")
_NON_DIGITS = re.compile(r"\D")
# "<street>[, <unit>], <city>, <ST> <zip>"
_FULL_ADDRESS = re.compile(
    r"^(?P<street>[^,]+?)\s*,\s*(?:(?P<unit>[^,]+?)\s*,\s*)?(?P<city>[^,]+?)\s*,\s*"
    r"(?P<state>[A-Za-z]{2})\s*(?P<zip>\d{5}(?:-\d{4})?)$"
)
_STREET_ONLY = re.compile(r"^\d+[A-Za-z]?\s+\S.*$")


def format_address(address: str, default_locality: str) -> str:
    """Normalize a postal address to ``street, city, ST zip``.

    A bare street line ("36 Colonial Ln") is assumed to be local and gets
    ``default_locality`` appended. Text that is neither is returned trimmed.
    """
    text = _WHITESPACE.sub(" ", address or "").strip()
    if not text:
        return text

    match = _FULL_ADDRESS.match(text)
    if match:
        parts = [match["street"]]
        if match["unit"]:
            parts.append(match["unit"])
        parts.append(match["city"])
        return f"{', '.join(parts)}, {match['state'].upper()} {match['zip']}"

    if "," not in text and _STREET_ONLY.match(text):
        return f"{text}, {default_locality}"
    return text


def normalize_phone(phone: str) -> str:
    digits = _NON_DIGITS.sub("", phone or "")
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) != 10:
        raise ValueError("phone number must contain 10 digits")
    return digits


def parse_date_range(start: date | None, end: date | None) -> tuple[date | None, date | None]:
    if start is not None and end is not None and start > end:
        raise ValidationError("Start date must be before or on end date")
    return start, end
