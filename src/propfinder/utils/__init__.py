"""
Utility modules for the PropFinder API.

Formatting and validation helpers shared between backend and frontend.
"""

from propfinder.utils.formatting import (
    format_price,
    get_property_type_label,
    get_transaction_type_label,
    slugify,
    capitalize_words,
    truncate_text,
    iso_timestamp,
)
from propfinder.utils.validators import (
    is_valid_email,
    is_valid_phone_number,
)

__all__ = [
    "format_price",
    "get_property_type_label",
    "get_transaction_type_label",
    "slugify",
    "capitalize_words",
    "truncate_text",
    "iso_timestamp",
    "is_valid_email",
    "is_valid_phone_number",
]
