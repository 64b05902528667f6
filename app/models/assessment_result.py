from sqlalchemy import Column, String, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from app.db import Base


class AssessmentResult(Base):
    """A scored gifts assessment plus the natural abilities declared with it.

    ``top*_gift_key`` and ``natural_abilities`` together form the person's
    attribute set used by ministry matching.
    """
    __tablename__ = "assessment_results"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    organization_id = Column(String, ForeignKey("organizations.id"), nullable=True, index=True)
    answers = Column(JSON, nullable=False, default=dict)
    scores = Column(JSON, nullable=False, default=dict)
    top1_gift_key = Column(String, nullable=False)
    top2_gift_key = Column(String, nullable=False)
    top3_gift_key = Column(String, nullable=False)
    natural_abilities = Column(JSON, nullable=False, default=list)
    ministry_interests = Column(JSON, nullable=False, default=list)
    age_groups = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))
    expires_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="assessment_results")

    @property
    def top_gift_keys(self) -> list[str]:
        return [self.top1_gift_key, self.top2_gift_key, self.top3_gift_key]
