from sqlalchemy import Column, String, Text, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import enum
import random
import re
import uuid

from app.db import Base


class OrganizationStatus(enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DENIED = "DENIED"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TRIAL = "TRIAL"


def generate_invite_code(name: str) -> str:
    """Initials of up to three words of the church name plus a 4-digit number, e.g. GCC4821."""
    words = re.sub(r"[^A-Z\s]", "", (name or "").upper()).split()
    prefix = "".join(w[0] for w in words[:3])
    return f"{prefix}{random.randint(1000, 9999)}"


def _default_invite_code(context) -> str:
    return generate_invite_code(context.get_current_parameters().get("name"))


class Organization(Base):
    __tablename__ = "organizations"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    subdomain = Column(String, unique=True, nullable=True)  # e.g. "gracechurch"
    # Shared with the congregation so members can join; stored upper-case
    invite_code = Column(String, unique=True, nullable=False, index=True, default=_default_invite_code)
    contact_email = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(Enum(OrganizationStatus), nullable=False, default=OrganizationStatus.PENDING)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))

    members = relationship("User", back_populates="organization")
    ministry_opportunities = relationship(
        "MinistryOpportunity", back_populates="organization", cascade="all, delete-orphan"
    )
