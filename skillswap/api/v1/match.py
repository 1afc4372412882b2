import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from skillswap.core.rate_limit import rate_limit
from skillswap.core.security import require_api_key
from skillswap.matching import build_match_proposal, evaluate_match
from skillswap.schemas import MatchProposal, MatchResult, SkillProfile

router = APIRouter()
logger = logging.getLogger(__name__)


class MatchEvaluateRequest(BaseModel):
    viewer: SkillProfile | None = None
    candidate: SkillProfile | None = None


class MatchProposalRequest(BaseModel):
    user_a_id: str = Field(min_length=1, max_length=128)
    user_b_id: str = Field(min_length=1, max_length=128)
    viewer: SkillProfile | None = None
    candidate: SkillProfile | None = None
    post_id: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


@router.post("/match/evaluate", response_model=MatchResult)
@rate_limit()
async def match_evaluate(
    request: Request,
    payload: MatchEvaluateRequest,
    _: None = Depends(require_api_key),
):
    _ = request
    return evaluate_match(payload.viewer, payload.candidate)


@router.post("/match/proposal", response_model=MatchProposal)
@rate_limit()
async def match_proposal(
    request: Request,
    payload: MatchProposalRequest,
    _: None = Depends(require_api_key),
):
    _ = request
    try:
        proposal = build_match_proposal(
            payload.user_a_id,
            payload.user_b_id,
            payload.viewer,
            payload.candidate,
            post_id=payload.post_id,
            meta=payload.meta,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.info(
        "match_proposal_built user_a=%s user_b=%s post_id=%s",
        proposal.user_a_id,
        proposal.user_b_id,
        proposal.post_id,
    )
    return proposal
