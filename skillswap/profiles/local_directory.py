from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from skillswap.schemas import SkillPost, SkillProfile

from .provider import ProfileProvider

logger = logging.getLogger(__name__)


class LocalProfileDirectory(ProfileProvider):
    """Profiles and skill posts read from a JSON export."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        raw = self._load(self.path)
        self._profiles = self._parse_profiles(raw.get("users"))
        self._posts = self._parse_posts(raw.get("posts"))

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        if not path.exists():
            logger.warning("profile_directory_missing path=%s", path)
            return {}
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Failed to read profile directory '{path}': {exc}") from exc
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid profile directory '{path}': expected a top-level object.")
        return raw

    @staticmethod
    def _parse_profiles(raw: Any) -> dict[str, SkillProfile]:
        profiles: dict[str, SkillProfile] = {}
        if not isinstance(raw, dict):
            return profiles
        for user_id, data in raw.items():
            if not isinstance(data, dict):
                continue
            try:
                profile = SkillProfile.model_validate({**data, "user_id": str(user_id)})
            except ValidationError as exc:
                logger.warning("profile_skipped user_id=%s: %s", user_id, exc)
                continue
            profiles[str(user_id)] = profile
        return profiles

    @staticmethod
    def _parse_posts(raw: Any) -> list[SkillPost]:
        posts: list[SkillPost] = []
        if not isinstance(raw, list):
            return posts
        for index, data in enumerate(raw):
            if not isinstance(data, dict):
                continue
            try:
                posts.append(SkillPost.model_validate(data))
            except ValidationError as exc:
                logger.warning("post_skipped index=%s: %s", index, exc)
        return posts

    def get_profile(self, user_id: str) -> SkillProfile | None:
        return self._profiles.get(user_id)

    def list_posts(self) -> list[SkillPost]:
        return list(self._posts)
