"""
Helper functions for the catalog sync library
"""

from .payload_utils import get_nested_value, get_list
from .string_utils import strip_html, to_string
from .validation_utils import validate_url, is_valid_image_url, is_number, is_integer

__all__ = [
    "get_nested_value",
    "get_list",
    "strip_html",
    "to_string",
    "validate_url",
    "is_valid_image_url",
    "is_number",
    "is_integer",
]
