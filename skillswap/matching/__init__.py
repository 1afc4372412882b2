from .evaluate import build_match_proposal, evaluate_match
from .explore import build_explore_feed, matches_category, matches_search
from .skills import compute_match_score, intersect, is_mutual_match, normalize_skills

__all__ = [
    "normalize_skills",
    "intersect",
    "is_mutual_match",
    "compute_match_score",
    "evaluate_match",
    "build_match_proposal",
    "build_explore_feed",
    "matches_search",
    "matches_category",
]
