from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """Field types understood by the remote search index.

    The enum value is the wire representation used in schema payloads.
    """

    TEXT_KEYWORD = "text_keyword"
    TEXT = "text"
    KEYWORD = "keyword"
    HIERARCHY = "hierarchy"
    VARIANTS = "variants"
    IMAGE_URL = "image_url"
    URL = "url"
    FLOAT = "float"
    INTEGER = "integer"
    DOUBLE = "double"
    NAME_VALUE_LIST = "name_value_list"

    @classmethod
    def from_wire(cls, value: str) -> "FieldType":
        """Resolve a wire value; raises ValueError for unknown types"""
        return cls(value)


STRING_TYPES = frozenset({FieldType.TEXT, FieldType.TEXT_KEYWORD, FieldType.KEYWORD})
NUMERIC_TYPES = frozenset({FieldType.FLOAT, FieldType.DOUBLE})
