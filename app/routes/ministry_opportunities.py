from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Iterable, List, Optional
import logging

from app.db import get_db
from app.core.gifts import is_gift_key
from app.core.natural_abilities import is_ability_key
from app.core.settings import settings
from app.exceptions import NotFoundException, ValidationException
from app.models.ministry_opportunity import MinistryOpportunity
from app.models.organization import Organization
from app.models.user import User, UserRole
from app.schemas.ministry_opportunity import (
    MinistryOpportunityCreate,
    MinistryOpportunityUpdate,
    MinistryOpportunityOut,
)
from app.schemas.matching import CandidateOut, CandidatesResponse
from app.services.auth import require_org_admin
from app.services.audit import log_opportunity_change, log_match_listing
from app.services.matching import rank_candidates
from app.services.results import organization_candidates

logger = logging.getLogger("app.ministry_opportunities")

router = APIRouter(prefix="/admin/ministry-opportunities", tags=["Ministry Opportunities"])


def resolve_organization_id(current_user: User, db: Session, organization_id: Optional[str] = None) -> str:
    """The organization an admin request acts on.

    Super admins may "view as" another organization via ``organization_id``;
    everyone else is pinned to their own organization.
    """
    if organization_id and current_user.role == UserRole.SUPER_ADMIN:
        if not db.query(Organization).filter(Organization.id == organization_id).first():
            raise NotFoundException("Organization not found")
        return organization_id
    if not current_user.organization_id:
        raise ValidationException("User organization not found")
    return current_user.organization_id


def _check_keys(field: str, keys: Optional[Iterable[str]], validator) -> None:
    if not keys:
        return
    unknown = [k for k in keys if not validator(k)]
    if unknown:
        raise ValidationException(f"Unknown keys in {field}: {', '.join(unknown)}")


def validate_attribute_lists(data: dict) -> None:
    _check_keys("required_gifts", data.get("required_gifts"), is_gift_key)
    _check_keys("preferred_gifts", data.get("preferred_gifts"), is_gift_key)
    _check_keys("required_abilities", data.get("required_abilities"), is_ability_key)
    _check_keys("preferred_abilities", data.get("preferred_abilities"), is_ability_key)


def _get_owned(db: Session, opportunity_id: str, organization_id: str) -> MinistryOpportunity:
    opp = db.query(MinistryOpportunity).filter_by(id=opportunity_id, organization_id=organization_id).first()
    if not opp:
        raise NotFoundException("Ministry opportunity not found")
    return opp


@router.get("", response_model=List[MinistryOpportunityOut])
def list_opportunities(
    organization_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_org_admin),
):
    org_id = resolve_organization_id(current_user, db, organization_id)
    return (
        db.query(MinistryOpportunity)
        .filter(MinistryOpportunity.organization_id == org_id)
        .order_by(MinistryOpportunity.created_at.desc())
        .all()
    )


@router.post("", response_model=MinistryOpportunityOut, status_code=201)
def create_opportunity(
    payload: MinistryOpportunityCreate,
    organization_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_org_admin),
):
    org_id = resolve_organization_id(current_user, db, organization_id)
    data = payload.model_dump()
    validate_attribute_lists(data)
    opp = MinistryOpportunity(organization_id=org_id, **data)
    db.add(opp)
    db.commit()
    db.refresh(opp)
    log_opportunity_change(current_user.id, opp.id, org_id, "create")
    return opp


@router.put("/{opportunity_id}", response_model=MinistryOpportunityOut)
def update_opportunity(
    opportunity_id: str,
    payload: MinistryOpportunityUpdate,
    organization_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_org_admin),
):
    org_id = resolve_organization_id(current_user, db, organization_id)
    opp = _get_owned(db, opportunity_id, org_id)
    data = payload.model_dump(exclude_unset=True)
    validate_attribute_lists(data)
    for k, v in data.items():
        setattr(opp, k, v)
    db.add(opp)
    db.commit()
    db.refresh(opp)
    log_opportunity_change(current_user.id, opp.id, org_id, "update")
    return opp


@router.delete("/{opportunity_id}")
def delete_opportunity(
    opportunity_id: str,
    organization_id: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_org_admin),
):
    org_id = resolve_organization_id(current_user, db, organization_id)
    opp = _get_owned(db, opportunity_id, org_id)
    db.delete(opp)
    db.commit()
    log_opportunity_change(current_user.id, opportunity_id, org_id, "delete")
    return {"deleted": True}


@router.get("/{opportunity_id}/candidates", response_model=CandidatesResponse)
def list_candidates(
    opportunity_id: str,
    organization_id: Optional[str] = None,
    min_score: int = Query(0, ge=0, le=100),
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_org_admin),
):
    org_id = resolve_organization_id(current_user, db, organization_id)
    opp = _get_owned(db, opportunity_id, org_id)
    ranked = rank_candidates(
        opp,
        organization_candidates(db, org_id),
        min_score=min_score,
        limit=limit or settings.default_match_limit,
    )
    log_match_listing(current_user.id, org_id, "candidates", len(ranked), opportunity_id=opp.id)
    return CandidatesResponse(
        opportunity_id=opp.id,
        candidates=[
            CandidateOut(
                user_id=m.user.id,
                name=m.user.name,
                email=m.user.email,
                result_id=m.result.id,
                top_gifts=m.result.top_gift_keys,
                natural_abilities=m.result.natural_abilities or [],
                match_score=m.match_score,
                reasons=m.reasons,
            )
            for m in ranked
        ],
    )
