from pydantic import BaseModel
from typing import List

from app.schemas.ministry_opportunity import MinistryOpportunityOut


class OpportunityMatchOut(BaseModel):
    opportunity: MinistryOpportunityOut
    match_score: int
    reasons: List[str]


class OpportunityMatchesResponse(BaseModel):
    result_id: str
    attributes: List[str]
    matches: List[OpportunityMatchOut]


class CandidateOut(BaseModel):
    user_id: str
    name: str
    email: str
    result_id: str
    top_gifts: List[str]
    natural_abilities: List[str]
    match_score: int
    reasons: List[str]


class CandidatesResponse(BaseModel):
    opportunity_id: str
    candidates: List[CandidateOut]
