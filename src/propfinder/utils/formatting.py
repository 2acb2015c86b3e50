"""
Formatting Utilities

Display helpers shared with the web client: prices, Spanish labels for
listing enumerations, URL slugs and text shortening.
"""

import re
import unicodedata
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

PROPERTY_TYPE_LABELS = {
    "apartment": "Departamento",
    "house": "Casa",
    "commercial": "Comercial",
    "land": "Terreno",
}

TRANSACTION_TYPE_LABELS = {
    "sale": "Venta",
    "rent": "Renta",
}

RENT_SUFFIX = "/mes"


def format_price(price: Union[int, float], transaction_type: str = "sale") -> str:
    """Format a price as whole dollars.

    Args:
        price: Price value to format.
        transaction_type: "sale" or "rent"; rent prices are per month.

    Returns:
        Formatted price string.

    Example:
        >>> format_price(250000)
        '$250,000'
        >>> format_price(18000, "rent")
        '$18,000/mes'
    """
    # Halves round away from zero
    rounded = int(Decimal(str(price)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    formatted = f"{sign}${abs(rounded):,}"

    if transaction_type == "rent":
        return f"{formatted}{RENT_SUFFIX}"
    return formatted


def get_property_type_label(property_type: str) -> str:
    """Spanish label for a property type; unknown types are returned as-is."""
    return PROPERTY_TYPE_LABELS.get(property_type, property_type)


def get_transaction_type_label(transaction_type: str) -> str:
    """Spanish label for a transaction type; unknown types are returned as-is."""
    return TRANSACTION_TYPE_LABELS.get(transaction_type, transaction_type)


def slugify(text: str) -> str:
    """Turn text into a URL slug.

    Example:
        >>> slugify("Casa Familiar con Jardín")
        'casa-familiar-con-jardin'
    """
    text = unicodedata.normalize("NFD", str(text))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.lower().strip()
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"[^\w-]+", "", text, flags=re.ASCII)
    text = re.sub(r"--+", "-", text)
    return text.strip("-")


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest.

    Accented initials count as word characters, so "élan" becomes "Élan".
    """
    return re.sub(
        r"\w\S*",
        lambda match: match.group(0)[0].upper() + match.group(0)[1:].lower(),
        text,
    )


def truncate_text(text: str, max_length: int) -> str:
    """Shorten text to max_length characters, ending with '...'."""
    if len(text) <= max_length:
        return text
    return text[:max(max_length - 3, 0)] + "..."


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-01-20T10:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
