from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth as firebase_auth
from sqlalchemy.orm import Session
import logging

from app.db import get_db
from app.core.settings import settings
from app.exceptions import UnauthorizedException, ForbiddenException, ValidationException
from app.models.user import User, UserRole, ROLE_HIERARCHY

logger = logging.getLogger("app.auth")

security = HTTPBearer()

# Test tokens for development and test runs only (persisted so FK constraints pass)
MOCK_TOKENS = {
    "mock-member-token": ("member-1", "member@example.com", "Member", "One", UserRole.CHURCH_MEMBER),
    "mock-admin-token": ("admin-1", "admin@example.com", "Admin", "One", UserRole.CHURCH_SUPER_ADMIN),
    "mock-super-admin-token": ("super-admin-1", "super@example.com", "Super", "Admin", UserRole.SUPER_ADMIN),
}


def _mock_user(db: Session, token: str) -> User:
    uid, email, first, last, role = MOCK_TOKENS[token]
    user = db.query(User).filter(User.id == uid).first()
    if not user:
        user = User(id=uid, email=email, first_name=first, last_name=last, role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    token = credentials.credentials

    if token in MOCK_TOKENS:
        if settings.mock_auth_enabled:
            return _mock_user(db, token)
        logger.warning(f"Rejected mock token outside development (env={settings.environment})")
        raise UnauthorizedException("Invalid or expired Firebase token")

    try:
        decoded_token = firebase_auth.verify_id_token(token)
        user_id = decoded_token["uid"]
        email = decoded_token["email"]
    except Exception:
        raise UnauthorizedException("Invalid or expired Firebase token")

    # First try to find user by Firebase UID
    user = db.query(User).filter(User.id == user_id).first()

    # If not found by UID, try to find by email (for existing users)
    if not user:
        user = db.query(User).filter(User.email == email).first()
        if user:
            # Update the user's ID to match Firebase UID
            user.id = user_id
            db.commit()
            return user

    # If still not found, create a new member; they join a church by invite code
    if not user:
        user = User(
            id=user_id,
            email=email,
            first_name=decoded_token.get("given_name"),
            last_name=decoded_token.get("family_name"),
            display_name=decoded_token.get("name"),
            role=UserRole.CHURCH_MEMBER,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Created member {user.id} from Firebase token")

    return user


def require_role(min_role: UserRole):
    """Dependency factory: allow ``min_role`` and anything above it in the hierarchy."""
    required_level = ROLE_HIERARCHY[min_role]

    def role_checker(user: User = Depends(get_current_user)) -> User:
        if user.role_level < required_level:
            raise ForbiddenException(f"{min_role.value} role or higher required")
        return user
    return role_checker


require_org_admin = require_role(UserRole.MINISTRY_LEADER)


def require_member_with_organization(user: User = Depends(get_current_user)) -> User:
    if not user.organization_id:
        raise ValidationException("Join a church with its invite code first")
    return user
