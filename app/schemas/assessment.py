from pydantic import BaseModel, Field
from typing import Dict, List
from datetime import datetime


class AssessmentSubmission(BaseModel):
    answers: Dict[str, int] = Field(..., description="question_code -> 1..5")
    natural_abilities: List[str] = Field(default_factory=list)
    ministry_interests: List[str] = Field(default_factory=list)
    age_groups: List[str] = Field(default_factory=list)


class RankedGift(BaseModel):
    gift_key: str
    name: str
    score: int
    percentage: int


class AssessmentResultOut(BaseModel):
    id: str
    user_id: str
    organization_id: str | None
    version: int
    totals: Dict[str, int]
    ranked: List[RankedGift]
    top_gifts: List[str]
    natural_abilities: List[str]
    ministry_interests: List[str]
    age_groups: List[str]
    created_at: datetime
    expires_at: datetime
