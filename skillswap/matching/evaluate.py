from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from skillswap.schemas import ExchangeSkills, MatchProposal, MatchResult, SkillProfile

from .skills import compute_match_score, intersect, is_mutual_match

_EMPTY_PROFILE = SkillProfile()


def evaluate_match(viewer: SkillProfile | None, candidate: SkillProfile | None) -> MatchResult:
    """Score ``candidate`` from the point of view of ``viewer``.

    A missing profile on either side is treated as one with no skills.
    """
    a = viewer or _EMPTY_PROFILE
    b = candidate or _EMPTY_PROFILE
    return MatchResult(
        is_mutual=is_mutual_match(a.teaches, a.wants, b.teaches, b.wants),
        score=compute_match_score(a.teaches, a.wants, b.teaches, b.wants),
        a_teaches_b=intersect(a.teaches, b.wants),
        b_teaches_a=intersect(b.teaches, a.wants),
    )


def build_match_proposal(
    user_a_id: str,
    user_b_id: str,
    viewer: SkillProfile | None,
    candidate: SkillProfile | None,
    *,
    post_id: str | None = None,
    meta: dict[str, Any] | None = None,
) -> MatchProposal:
    if not user_a_id or not user_b_id:
        raise ValueError("both user ids are required")
    if user_a_id == user_b_id:
        raise ValueError("cannot propose a match with yourself")

    result = evaluate_match(viewer, candidate)
    return MatchProposal(
        user_a_id=user_a_id,
        user_b_id=user_b_id,
        skills=ExchangeSkills(a_teaches_b=result.a_teaches_b, b_teaches_a=result.b_teaches_a),
        post_id=post_id,
        created_at=datetime.now(timezone.utc),
        meta=dict(meta or {}),
    )
