"""
Locale expansion policy.

Source systems deliver localized values as ``{locale: value}`` maps. The
canonical document keeps the default locale under the bare field name and
every other locale under ``<field>_<locale>``::

    expand_localized("name", {"en-US": "Shoe", "lt-LT": "Batas"})
    # {"name": "Shoe", "name_lt-LT": "Batas"}

There is no implicit fallback: when the default locale is missing, the bare
field is not emitted. Callers that want one use ``first_available`` or
``value_for_locale(..., fallback=True)``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from catalog_sync.shared.constants import DEFAULT_LOCALE


def localized_field_name(base_name: str, locale: str) -> str:
    """Canonical field name for a base name and locale"""
    if locale == DEFAULT_LOCALE:
        return base_name
    return f"{base_name}_{locale}"


def unwrap_value(value: Any) -> Any:
    """Structured values ``{"value": ...}`` carry the real value inside"""
    if isinstance(value, Mapping) and "value" in value:
        return value["value"]
    return value


def is_empty_value(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict)) and len(value) == 0:
        return True
    return False


def iter_localized(values: Any):
    """Yield ``(locale, value)`` pairs that survive the expansion rules"""
    if not isinstance(values, Mapping):
        return
    for locale, value in values.items():
        if not isinstance(locale, str) or not locale:
            continue
        value = unwrap_value(value)
        if is_empty_value(value):
            continue
        yield locale, value


def expand_localized(base_name: str, values: Any) -> Dict[str, Any]:
    """Expand a ``{locale: value}`` map into canonical fields"""
    return {
        localized_field_name(base_name, locale): value
        for locale, value in iter_localized(values)
    }


def first_available(values: Any, default: Any = None) -> Any:
    """First usable value in source order"""
    for _, value in iter_localized(values):
        return value
    return default


def value_for_locale(
    values: Any, locale: str, fallback: bool = True, default: Any = None
) -> Optional[Any]:
    """Value for ``locale``, optionally falling back to the first available one"""
    if isinstance(values, Mapping) and locale in values:
        value = unwrap_value(values[locale])
        if not is_empty_value(value):
            return value
    if fallback:
        return first_available(values, default)
    return default
