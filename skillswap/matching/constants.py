from __future__ import annotations

from skillswap.core.matching_config import get_matching_value

_DEFAULT_CATEGORIES = (
    "Development",
    "Design",
    "Data Science",
    "Marketing",
    "Photography",
    "Languages",
    "Music",
    "Business",
    "Writing",
    "Other",
)
_DEFAULT_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")

ALL_CATEGORIES = "all"
DEFAULT_MAX_RESULTS = 50


def skill_categories() -> tuple[str, ...]:
    raw = get_matching_value("explore.categories", _DEFAULT_CATEGORIES)
    return tuple(str(item) for item in raw or _DEFAULT_CATEGORIES)


def skill_levels() -> tuple[str, ...]:
    raw = get_matching_value("skills.levels", _DEFAULT_LEVELS)
    return tuple(str(item) for item in raw or _DEFAULT_LEVELS)


def explore_max_results() -> int:
    try:
        value = int(get_matching_value("explore.max_results", DEFAULT_MAX_RESULTS))
    except (TypeError, ValueError):
        return DEFAULT_MAX_RESULTS
    return value if value > 0 else DEFAULT_MAX_RESULTS


def default_category() -> str:
    value = get_matching_value("explore.default_category", ALL_CATEGORIES)
    return str(value).strip() or ALL_CATEGORIES
