from __future__ import annotations

from typing import Protocol

from skillswap.schemas import SkillPost, SkillProfile


class ProfileProvider(Protocol):
    def get_profile(self, user_id: str) -> SkillProfile | None:
        """Return the skill profile for ``user_id`` if one exists."""

    def list_posts(self) -> list[SkillPost]:
        """Return published skill posts, newest first."""
