from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.db import get_db
from app.exceptions import NotFoundException, ValidationException
from app.models.organization import Organization
from app.models.user import User
from app.schemas.organization import (
    OrganizationInviteOut,
    JoinOrganizationRequest,
    JoinOrganizationResponse,
)
from app.services.auth import get_current_user
from app.services.audit import log_organization_join

logger = logging.getLogger("app.organizations")

router = APIRouter(prefix="/organizations", tags=["Organizations"])


def find_by_invite_code(db: Session, invite_code: str):
    return db.query(Organization).filter(Organization.invite_code == invite_code.strip().upper()).first()


@router.get("/invite/{invite_code}", response_model=OrganizationInviteOut)
def lookup_invite_code(invite_code: str, db: Session = Depends(get_db)):
    """Public lookup so the join screen can show the church name before signing in."""
    org = find_by_invite_code(db, invite_code)
    if not org:
        raise NotFoundException("Church code not found. Please check the code and try again.")
    return org


@router.post("/join", response_model=JoinOrganizationResponse)
def join_organization(
    payload: JoinOrganizationRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    org = find_by_invite_code(db, payload.invite_code)
    if not org:
        raise ValidationException("Invalid church code. Please check the code and try again.")

    user = db.query(User).filter(User.id == current_user.id).first()
    if user.organization_id == org.id:
        raise ValidationException("You are already a member of this church")
    if user.organization_id:
        raise ValidationException("You already belong to a church; ask an administrator to move you")

    user.organization_id = org.id
    db.commit()
    logger.info(f"User {user.id} joined organization {org.id}")
    log_organization_join(user.id, org.id)
    return JoinOrganizationResponse(
        organization=OrganizationInviteOut.model_validate(org),
        message="Successfully joined the congregation",
    )
