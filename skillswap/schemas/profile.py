from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _loose_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return []


class SkillProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "uid", "id"))
    name: str | None = None
    teaches: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("teaches", "skillsToTeach", "skills_have"),
    )
    wants: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("wants", "skillsToLearn", "skills_want"),
    )

    @field_validator("teaches", "wants", mode="before")
    @classmethod
    def _coerce_skill_list(cls, value: Any) -> list[Any]:
        return _loose_list(value)


class SkillPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_id: str | None = Field(default=None, validation_alias=AliasChoices("post_id", "id"))
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    author_name: str | None = Field(default=None, validation_alias=AliasChoices("author_name", "name"))
    offering: list[Any] = Field(default_factory=list)
    requesting: list[Any] = Field(default_factory=list)
    description: str = ""
    category: str | None = None

    @field_validator("offering", "requesting", mode="before")
    @classmethod
    def _coerce_skill_list(cls, value: Any) -> list[Any]:
        return _loose_list(value)

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    def as_profile(self) -> SkillProfile:
        return SkillProfile(
            user_id=self.user_id,
            name=self.author_name,
            teaches=self.offering,
            wants=self.requesting,
        )
