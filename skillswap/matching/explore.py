from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from skillswap.schemas import ExploreEntry, SkillPost, SkillProfile

from .constants import ALL_CATEGORIES, default_category, explore_max_results
from .evaluate import evaluate_match

logger = logging.getLogger(__name__)


def _contains(values: Iterable[Any], needle: str) -> bool:
    return any(isinstance(value, str) and needle in value.lower() for value in values)


def matches_search(post: SkillPost, term: str | None) -> bool:
    needle = (term or "").lower()
    if not needle:
        return True
    return (
        needle in (post.author_name or "").lower()
        or _contains(post.offering, needle)
        or _contains(post.requesting, needle)
        or needle in post.description.lower()
    )


def matches_category(post: SkillPost, category: str | None) -> bool:
    """A post fits a category it was filed under, or one named inside its skills."""
    needle = (category or "").strip().lower()
    if not needle or needle == ALL_CATEGORIES:
        return True
    if (post.category or "").strip().lower() == needle:
        return True
    return _contains(post.offering, needle) or _contains(post.requesting, needle)


def build_explore_feed(
    viewer: SkillProfile | None,
    posts: Iterable[SkillPost],
    *,
    search: str | None = "",
    category: str | None = None,
    mutual_only: bool = False,
    exclude_user_id: str | None = None,
    limit: int | None = None,
) -> list[ExploreEntry]:
    """Score posts against the viewer, filter them and rank the survivors.

    Mutual matches come first, then higher scores. Equal entries keep the
    order in which ``posts`` supplied them. Without a ``category`` the
    configured default applies.
    """
    if category is None:
        category = default_category()
    entries: list[ExploreEntry] = []
    for post in posts:
        if exclude_user_id and post.user_id == exclude_user_id:
            continue
        if not matches_search(post, search) or not matches_category(post, category):
            continue
        result = evaluate_match(viewer, post.as_profile())
        if mutual_only and not result.is_mutual:
            continue
        entries.append(ExploreEntry(post=post, match=result))

    entries.sort(key=lambda entry: (entry.match.is_mutual, entry.match.score), reverse=True)

    max_results = limit if limit is not None and limit > 0 else explore_max_results()
    logger.debug(
        "explore_feed_built candidates=%s returned=%s mutual_only=%s",
        len(entries),
        min(len(entries), max_results),
        mutual_only,
    )
    return entries[:max_results]
