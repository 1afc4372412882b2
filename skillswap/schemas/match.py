from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .profile import SkillPost


class MatchResult(BaseModel):
    is_mutual: bool
    score: int
    a_teaches_b: list[str] = Field(default_factory=list)
    b_teaches_a: list[str] = Field(default_factory=list)

    @field_validator("score")
    @classmethod
    def _validate_score(cls, value: int) -> int:
        if value < 0 or value > 100:
            raise ValueError("score must be between 0 and 100")
        return value


class ExchangeSkills(BaseModel):
    a_teaches_b: list[str] = Field(default_factory=list)
    b_teaches_a: list[str] = Field(default_factory=list)


class MatchProposal(BaseModel):
    user_a_id: str
    user_b_id: str
    skills: ExchangeSkills
    post_id: str | None = None
    status: Literal["pending"] = "pending"
    created_at: datetime
    meta: dict[str, Any] = Field(default_factory=dict)


class ExploreEntry(BaseModel):
    post: SkillPost
    match: MatchResult
