from sqlalchemy import Column, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
import enum
from datetime import datetime, UTC
from app.db import Base
import uuid


class UserRole(enum.Enum):
    SUPER_ADMIN = "SUPER_ADMIN"                      # Platform admin
    CHURCH_SUPER_ADMIN = "CHURCH_SUPER_ADMIN"        # Senior / executive pastor
    PASTORAL_STAFF = "PASTORAL_STAFF"
    FINANCE_ADMIN = "FINANCE_ADMIN"
    ASSIMILATION_DIRECTOR = "ASSIMILATION_DIRECTOR"
    MINISTRY_LEADER = "MINISTRY_LEADER"
    ASSIMILATION_MEMBER = "ASSIMILATION_MEMBER"
    VOLUNTEER = "VOLUNTEER"
    CHURCH_MEMBER = "CHURCH_MEMBER"


# Higher number = more authority. Role checks compare against these levels.
ROLE_HIERARCHY = {
    UserRole.SUPER_ADMIN: 100,
    UserRole.CHURCH_SUPER_ADMIN: 90,
    UserRole.PASTORAL_STAFF: 80,
    UserRole.FINANCE_ADMIN: 70,
    UserRole.ASSIMILATION_DIRECTOR: 60,
    UserRole.MINISTRY_LEADER: 50,
    UserRole.ASSIMILATION_MEMBER: 30,
    UserRole.VOLUNTEER: 20,
    UserRole.CHURCH_MEMBER: 10,
}


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    organization_id = Column(String, ForeignKey("organizations.id"), nullable=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    display_name = Column(String, nullable=True)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.CHURCH_MEMBER)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))

    organization = relationship("Organization", back_populates="members")
    # Assessment results owned by this user
    assessment_results = relationship("AssessmentResult", back_populates="user", cascade="all, delete-orphan")

    @property
    def name(self) -> str:
        if self.display_name:
            return self.display_name
        full = " ".join(p for p in (self.first_name, self.last_name) if p)
        return full or self.email.split("@")[0]

    @property
    def role_level(self) -> int:
        return ROLE_HIERARCHY.get(self.role, 0)
