"""
String utility functions for the catalog sync library
"""

import html
import re
from typing import Any


_TAG_RE = re.compile(r"<[^>]+>")


def strip_html(html_content: Any) -> str:
    """Strip HTML tags from content to get plain text"""
    if not html_content or not isinstance(html_content, str):
        return ""
    text = _TAG_RE.sub("", html_content)
    text = html.unescape(text)
    # Clean up whitespace
    return " ".join(text.split())


def to_string(value: Any) -> str:
    """Cast a scalar to string; None and containers become an empty string.

    Integral floats lose their trailing ``.0`` (``25.0`` -> ``"25"``) so that
    prices coming from JSON numbers look the same as prices sent as strings.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""
