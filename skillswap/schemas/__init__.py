from .match import ExchangeSkills, ExploreEntry, MatchProposal, MatchResult
from .profile import SkillPost, SkillProfile

__all__ = [
    "SkillProfile",
    "SkillPost",
    "MatchResult",
    "ExchangeSkills",
    "MatchProposal",
    "ExploreEntry",
]
