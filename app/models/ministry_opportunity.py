from sqlalchemy import Column, String, Text, Integer, JSON, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import enum
import uuid

from app.db import Base


class OpportunityStatus(enum.Enum):
    OPEN = "OPEN"
    FILLED = "FILLED"
    CLOSED = "CLOSED"


class MinistryOpportunity(Base):
    __tablename__ = "ministry_opportunities"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    organization_id = Column(String, ForeignKey("organizations.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    # Gift / ability keys from the reference catalogs
    required_gifts = Column(JSON, nullable=False, default=list)
    preferred_gifts = Column(JSON, nullable=False, default=list)
    required_abilities = Column(JSON, nullable=False, default=list)
    preferred_abilities = Column(JSON, nullable=False, default=list)

    capacity = Column(Integer, nullable=False, default=1)
    current_count = Column(Integer, nullable=False, default=0)
    age_group_preference = Column(JSON, nullable=False, default=list)
    time_commitment = Column(String, nullable=True)
    contact_person = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    status = Column(Enum(OpportunityStatus), nullable=False, default=OpportunityStatus.OPEN)

    created_at = Column(DateTime, default=lambda: datetime.now(UTC))
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    organization = relationship("Organization", back_populates="ministry_opportunities")
