"""
Validation utility functions for the catalog sync library
"""

import posixpath
from typing import Any
from urllib.parse import urlparse

from catalog_sync.shared.constants.catalog import IMAGE_EXTENSIONS


def validate_url(url: Any) -> bool:
    """Validate absolute URL format"""
    if not url or not isinstance(url, str):
        return False

    if any(ch.isspace() for ch in url):
        return False

    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def is_valid_image_url(url: Any) -> bool:
    """Absolute URL whose path ends with a known image extension"""
    if not validate_url(url):
        return False

    path = urlparse(url).path or ""
    extension = posixpath.splitext(path)[1].lstrip(".").lower()
    return extension in IMAGE_EXTENSIONS


def is_number(value: Any) -> bool:
    """Numbers and numeric strings ("19.99") are accepted; booleans are not"""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str) and value.strip():
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


def is_integer(value: Any) -> bool:
    """Integers and integer strings ("42") are accepted; booleans are not"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, str) and value.strip():
        try:
            int(value.strip())
        except ValueError:
            return False
        return True
    return False
