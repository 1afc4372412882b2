from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from fractions import Fraction
from typing import Any


def _coerce_tag(value: Any) -> str:
    if value is None:
        return ""
    try:
        if isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode("utf-8", errors="replace")
        elif isinstance(value, str):
            text = value
        else:
            text = str(value)
    except Exception:  # noqa: BLE001 - an unprintable entry is dropped, not fatal
        return ""
    return text.strip().lower()


def _skill_items(raw: Any) -> list[Any]:
    """Materialize ``raw`` as a list of entries, or ``[]`` if it is not a skill list."""
    # A bare string or a mapping is not a skill list.
    if raw is None or isinstance(raw, (str, bytes, bytearray, Mapping)):
        return []
    if not isinstance(raw, Iterable):
        return []
    try:
        return list(raw)
    except Exception:  # noqa: BLE001 - a failing iterator degrades to no skills
        return []


def _materialize(*raws: Any) -> list[list[Any]]:
    # The same iterator passed in several slots is read once and shared.
    seen: dict[int, list[Any]] = {}
    items: list[list[Any]] = []
    for raw in raws:
        key = id(raw)
        if key not in seen:
            seen[key] = _skill_items(raw)
        items.append(seen[key])
    return items


def _ordered_tags(items: list[Any]) -> list[str]:
    tags: dict[str, None] = {}
    for item in items:
        tag = _coerce_tag(item)
        if tag:
            tags.setdefault(tag, None)
    return list(tags)


def _intersect_items(left: list[Any], right: list[Any]) -> list[str]:
    wanted = set(_ordered_tags(right))
    if not wanted:
        return []
    return [tag for tag in _ordered_tags(left) if tag in wanted]


def normalize_skills(raw: Any) -> set[str]:
    """Return the distinct trimmed, lowercased skill tags in ``raw``.

    ``None`` entries are dropped, bytes are decoded as UTF-8 and anything else
    goes through ``str()``. Input that is not a skill list yields an empty set.
    """
    return set(_ordered_tags(_skill_items(raw)))


def intersect(a: Any, b: Any) -> list[str]:
    """Tags present in both ``a`` and ``b``, ordered by first occurrence in ``a``."""
    left, right = _materialize(a, b)
    return _intersect_items(left, right)


def is_mutual_match(a_have: Any, a_want: Any, b_have: Any, b_want: Any) -> bool:
    a_have, a_want, b_have, b_want = _materialize(a_have, a_want, b_have, b_want)
    a_to_b = _intersect_items(a_have, b_want)
    b_to_a = _intersect_items(b_have, a_want)
    return bool(a_to_b) and bool(b_to_a)


def _coverage(offered: list[str], wanted: list[Any]) -> Fraction:
    # The share is taken over the want list as submitted, blanks and repeats included.
    if not wanted:
        # Nothing was asked for: any unsolicited overlap counts as full credit.
        return Fraction(1) if offered else Fraction(0)
    return min(Fraction(1), Fraction(len(offered), len(wanted)))


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def compute_match_score(a_have: Any, a_want: Any, b_have: Any, b_want: Any) -> int:
    """Symmetric coverage score in [0, 100].

    Each direction contributes the share of the other side's wanted entries it
    covers. The average is computed exactly and rounded half up.
    """
    a_have, a_want, b_have, b_want = _materialize(a_have, a_want, b_have, b_want)
    dir1 = _coverage(_intersect_items(a_have, b_want), b_want)
    dir2 = _coverage(_intersect_items(b_have, a_want), a_want)
    return _round_half_up((dir1 + dir2) / 2 * 100)
