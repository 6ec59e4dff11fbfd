"""
Category hierarchy builders.

Each platform describes category membership differently; all of them end up
as ordered lists of ``"Parent > Child"`` path strings plus one default
category, per locale where the source is localized.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from catalog_sync.shared.constants import HIERARCHY_SEPARATOR
from .locale import iter_localized


@dataclass
class CategoryHierarchy:
    paths: List[str] = field(default_factory=list)
    default: str = ""


def path_depth(path: str) -> int:
    return len(path.split(HIERARCHY_SEPARATOR))


def most_specific_path(paths: List[str]) -> str:
    """Deepest path; the first one wins on ties"""
    best = ""
    best_depth = 0
    for path in paths:
        depth = path_depth(path)
        if depth > best_depth:
            best, best_depth = path, depth
    return best


def from_leveled_buckets(
    buckets: Any, default_overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, CategoryHierarchy]:
    """
    Build per-locale hierarchies from level buckets::

        {"2": [{"localizedValues": {"path": {"en-US": "Men"}}}],
         "3": [{"localizedValues": {"path": {"en-US": "Men > Shoes"}}}]}

    Paths keep encounter order and are not deduplicated. The default
    category is taken from ``default_overrides`` (``{locale: name}``) when
    given, else it is the most specific path of the locale.
    """
    paths_by_locale: Dict[str, List[str]] = {}

    if isinstance(buckets, Mapping):
        for level_categories in buckets.values():
            if not isinstance(level_categories, list):
                continue
            for category in level_categories:
                if not isinstance(category, Mapping):
                    continue
                localized = category.get("localizedValues")
                if not isinstance(localized, Mapping):
                    continue
                for locale, path in iter_localized(localized.get("path")):
                    if isinstance(path, str):
                        paths_by_locale.setdefault(locale, []).append(path)

    overrides = dict(iter_localized(default_overrides))
    hierarchies: Dict[str, CategoryHierarchy] = {}
    for locale, paths in paths_by_locale.items():
        default = overrides.get(locale)
        if not isinstance(default, str):
            default = most_specific_path(paths)
        hierarchies[locale] = CategoryHierarchy(paths=paths, default=default)

    # Overrides for locales that have no paths still produce a default
    for locale, default in overrides.items():
        if locale not in hierarchies and isinstance(default, str):
            hierarchies[locale] = CategoryHierarchy(paths=[], default=default)

    return hierarchies


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def from_parent_paths(categories: Any) -> CategoryHierarchy:
    """
    Build a hierarchy from a flat list of ``{id, name, level, path}`` where
    ``path`` is a ``/``-separated chain of ancestor ids, e.g. ``"1/10/20"``.

    Ids are resolved against the names of the categories in the same list;
    unknown ids (usually the invisible root) are skipped. The default is the
    category with the lowest level, first one on ties.
    """
    if not isinstance(categories, list):
        return CategoryHierarchy()

    names: Dict[str, str] = {}
    for category in categories:
        if not isinstance(category, Mapping):
            continue
        category_id = category.get("id")
        name = category.get("name")
        if category_id is not None and isinstance(name, str) and name:
            names[str(category_id)] = name

    paths: List[str] = []
    default = ""
    lowest_level: Optional[int] = None

    for category in categories:
        if not isinstance(category, Mapping):
            continue
        name = category.get("name")
        if not isinstance(name, str) or not name:
            continue

        path = category.get("path")
        if isinstance(path, str) and path:
            resolved = [names[part] for part in path.split("/") if part in names]
            if resolved:
                paths.append(HIERARCHY_SEPARATOR.join(resolved))

        level = _as_int(category.get("level"))
        if level is None:
            continue
        if lowest_level is None or level < lowest_level:
            lowest_level = level
            default = name

    return CategoryHierarchy(paths=paths, default=default)


def from_type_and_tags(product_type: Any, tags: Any) -> CategoryHierarchy:
    """Primary type followed by tags, exact duplicates removed"""
    paths: List[str] = []
    candidates = [product_type]
    if isinstance(tags, list):
        candidates.extend(tags)

    for candidate in candidates:
        if isinstance(candidate, str) and candidate and candidate not in paths:
            paths.append(candidate)

    default = product_type if isinstance(product_type, str) else ""
    return CategoryHierarchy(paths=paths, default=default)
