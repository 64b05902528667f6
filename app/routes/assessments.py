from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
import uuid

from app.db import get_db
from app.core.gifts import get_gift_content
from app.core.natural_abilities import is_ability_key
from app.exceptions import NotFoundException, ValidationException
from app.models.assessment_result import AssessmentResult
from app.models.user import User
from app.schemas.assessment import AssessmentSubmission, AssessmentResultOut, RankedGift
from app.services.auth import get_current_user, require_member_with_organization
from app.services.audit import log_assessment_submit
from app.services.gift_scoring import score_spiritual_gifts
from app.services.results import expiry_from, latest_active_result

logger = logging.getLogger("app.assessments")

router = APIRouter(prefix="/assessments", tags=["Assessments"])


def _serialize(result: AssessmentResult) -> AssessmentResultOut:
    scores = result.scores or {}
    return AssessmentResultOut(
        id=result.id,
        user_id=result.user_id,
        organization_id=result.organization_id,
        version=scores.get("version", 1),
        totals=scores.get("totals", {}),
        ranked=[
            RankedGift(
                gift_key=r["gift_key"],
                name=get_gift_content(r["gift_key"]).name if get_gift_content(r["gift_key"]) else r["gift_key"],
                score=r["score"],
                percentage=r["percentage"],
            )
            for r in scores.get("ranked", [])
        ],
        top_gifts=result.top_gift_keys,
        natural_abilities=result.natural_abilities or [],
        ministry_interests=result.ministry_interests or [],
        age_groups=result.age_groups or [],
        created_at=result.created_at,
        expires_at=result.expires_at,
    )


@router.post("/submit", response_model=AssessmentResultOut)
def submit_assessment(
    payload: AssessmentSubmission,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_member_with_organization),
):
    try:
        scored = score_spiritual_gifts(payload.answers)
    except ValueError as ve:
        raise ValidationException(str(ve))
    unknown = [k for k in payload.natural_abilities if not is_ability_key(k)]
    if unknown:
        raise ValidationException(f"Unknown natural abilities: {', '.join(unknown)}")

    top1, top2, top3 = scored["top3"]
    result = AssessmentResult(
        id=str(uuid.uuid4()),
        user_id=current_user.id,
        organization_id=current_user.organization_id,
        answers=payload.answers,
        scores=scored,
        top1_gift_key=top1,
        top2_gift_key=top2,
        top3_gift_key=top3,
        # de-duplicated, order preserved
        natural_abilities=list(dict.fromkeys(payload.natural_abilities)),
        ministry_interests=payload.ministry_interests,
        age_groups=payload.age_groups,
        expires_at=expiry_from(),
    )
    db.add(result)
    db.commit()
    db.refresh(result)
    log_assessment_submit(current_user.id, result.id, current_user.organization_id, scored["top3"])
    return _serialize(result)


@router.get("/latest", response_model=AssessmentResultOut)
def latest_assessment(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    result = latest_active_result(db, current_user.id)
    if not result:
        raise NotFoundException("No active assessment result found")
    return _serialize(result)
