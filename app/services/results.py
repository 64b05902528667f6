"""Assessment result lookups shared by the assessment and matching routes."""
from datetime import datetime, timedelta, UTC
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.settings import settings
from app.models.assessment_result import AssessmentResult
from app.models.user import User
from app.services.matching import person_attribute_set


def _naive_utc_now() -> datetime:
    # DateTime columns are stored naive (UTC)
    return datetime.now(UTC).replace(tzinfo=None)


def expiry_from(created_at: Optional[datetime] = None) -> datetime:
    base = created_at or _naive_utc_now()
    return base + timedelta(days=settings.result_ttl_days)


def latest_active_result(
    db: Session, user_id: str, organization_id: Optional[str] = None
) -> Optional[AssessmentResult]:
    """Most recent non-expired result for a user, or None.

    With ``organization_id`` only results taken in that organization count.
    """
    query = db.query(AssessmentResult).filter(
        AssessmentResult.user_id == user_id, AssessmentResult.expires_at > _naive_utc_now()
    )
    if organization_id:
        query = query.filter(AssessmentResult.organization_id == organization_id)
    return (
        query
        .order_by(AssessmentResult.created_at.desc())
        .first()
    )


def result_attributes(result: AssessmentResult) -> frozenset:
    return person_attribute_set(result.top_gift_keys, result.natural_abilities or [])


def organization_candidates(db: Session, organization_id: str) -> List[Tuple[User, AssessmentResult, frozenset]]:
    """(user, latest active result, attribute set) for every assessed member of an organization."""
    rows = (
        db.query(User, AssessmentResult)
        .join(AssessmentResult, AssessmentResult.user_id == User.id)
        .filter(
            User.organization_id == organization_id,
            AssessmentResult.organization_id == organization_id,
            AssessmentResult.expires_at > _naive_utc_now(),
        )
        .order_by(AssessmentResult.created_at.desc())
        .all()
    )
    latest: Dict[str, Tuple[User, AssessmentResult]] = {}
    for user, result in rows:
        # rows are newest first, keep the first seen per user
        latest.setdefault(user.id, (user, result))
    return [(user, result, result_attributes(result)) for user, result in latest.values()]
