from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.db import get_db
from app.core.settings import settings
from app.exceptions import NotFoundException
from app.models.ministry_opportunity import MinistryOpportunity, OpportunityStatus
from app.models.user import User
from app.schemas.matching import OpportunityMatchOut, OpportunityMatchesResponse
from app.schemas.ministry_opportunity import MinistryOpportunityOut
from app.services.auth import require_member_with_organization
from app.services.audit import log_match_listing
from app.services.matching import rank_opportunities
from app.services.results import latest_active_result, result_attributes

router = APIRouter(prefix="/matching", tags=["Matching"])


@router.get("/opportunities", response_model=OpportunityMatchesResponse)
def my_opportunity_matches(
    min_score: int = Query(0, ge=0, le=100),
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_member_with_organization),
):
    """Open opportunities in the member's organization ranked by fit."""
    result = latest_active_result(db, current_user.id, current_user.organization_id)
    if not result:
        raise NotFoundException("Complete the gifts assessment to see ministry matches")
    attrs = result_attributes(result)
    opportunities = (
        db.query(MinistryOpportunity)
        .filter(
            MinistryOpportunity.organization_id == current_user.organization_id,
            MinistryOpportunity.status == OpportunityStatus.OPEN,
        )
        .all()
    )
    ranked = rank_opportunities(attrs, opportunities, min_score=min_score, limit=limit or settings.default_match_limit)
    log_match_listing(current_user.id, current_user.organization_id, "member", len(ranked))
    return OpportunityMatchesResponse(
        result_id=result.id,
        attributes=sorted(attrs),
        matches=[
            OpportunityMatchOut(
                opportunity=MinistryOpportunityOut.model_validate(m.opportunity),
                match_score=m.match_score,
                reasons=m.reasons,
            )
            for m in ranked
        ],
    )
