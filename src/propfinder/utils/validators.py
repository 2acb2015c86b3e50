"""
Contact detail validation shared with the web client.
"""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Mexican numbers: optional +52/52 prefix, then 2-4-4 digits
PHONE_PATTERN = re.compile(r"^(\+52|52)?[\s-]?(\d{2})[\s-]?(\d{4})[\s-]?(\d{4})$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email or ""))


def is_valid_phone_number(phone: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(phone or ""))
