# barberapp/phone.py

"""Brazilian mobile phone handling: DDD (2 digits) + 9-digit number.

The digit string is what gets stored and compared; the masked form is only
for display.
"""

import re

PHONE_DIGITS = 11

_NON_DIGIT = re.compile(r"\D")


def normalize_phone(value: str) -> str:
    """Keep only digits, truncated to 11."""
    if not value:
        return ""
    return _NON_DIGIT.sub("", value)[:PHONE_DIGITS]


def format_phone(value: str) -> str:
    """Progressive mask: "11", "(11) 98765", "(11) 98765-4321"."""
    digits = normalize_phone(value)
    if len(digits) <= 2:
        return digits
    if len(digits) <= 7:
        return f"({digits[:2]}) {digits[2:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"


def is_valid_phone(value: str) -> bool:
    return len(normalize_phone(value)) == PHONE_DIGITS
