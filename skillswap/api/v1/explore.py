import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, Field

from skillswap.core.rate_limit import explore_rate_limit
from skillswap.core.security import require_api_key
from skillswap.matching import build_explore_feed
from skillswap.profiles import ProfileProvider, get_default_profile_provider
from skillswap.schemas import ExploreEntry, SkillPost, SkillProfile

router = APIRouter()
logger = logging.getLogger(__name__)


class ExploreRequest(BaseModel):
    viewer: SkillProfile | None = None
    posts: list[SkillPost] = Field(default_factory=list)
    search: str = ""
    category: str | None = None
    mutual_only: bool = False
    limit: int | None = Field(default=None, ge=1, le=200)


@router.post("/explore", response_model=list[ExploreEntry])
@explore_rate_limit()
async def explore(
    request: Request,
    payload: ExploreRequest,
    _: None = Depends(require_api_key),
):
    _ = request
    viewer_id = payload.viewer.user_id if payload.viewer else None
    return build_explore_feed(
        payload.viewer,
        payload.posts,
        search=payload.search,
        category=payload.category,
        mutual_only=payload.mutual_only,
        exclude_user_id=viewer_id,
        limit=payload.limit,
    )


@router.get("/explore/{user_id}", response_model=list[ExploreEntry])
@explore_rate_limit()
async def explore_for_user(
    request: Request,
    user_id: str,
    search: str = "",
    category: str | None = None,
    mutual_only: bool = False,
    limit: int | None = Query(default=None, ge=1, le=200),
    directory: ProfileProvider = Depends(get_default_profile_provider),
    _: None = Depends(require_api_key),
):
    _ = request
    viewer = directory.get_profile(user_id)
    if viewer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown user.")
    feed = build_explore_feed(
        viewer,
        directory.list_posts(),
        search=search,
        category=category,
        mutual_only=mutual_only,
        exclude_user_id=user_id,
        limit=limit,
    )
    logger.info("explore_feed user_id=%s results=%s", user_id, len(feed))
    return feed
