from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import List, Optional
from datetime import datetime

from app.models.ministry_opportunity import OpportunityStatus


class MinistryOpportunityBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    required_gifts: List[str] = Field(default_factory=list)
    preferred_gifts: List[str] = Field(default_factory=list)
    required_abilities: List[str] = Field(default_factory=list)
    preferred_abilities: List[str] = Field(default_factory=list)
    capacity: int = Field(1, ge=1)
    current_count: int = Field(0, ge=0)
    age_group_preference: List[str] = Field(default_factory=list)
    time_commitment: Optional[str] = None
    contact_person: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    status: OpportunityStatus = OpportunityStatus.OPEN


class MinistryOpportunityCreate(MinistryOpportunityBase):
    pass


class MinistryOpportunityUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    required_gifts: Optional[List[str]] = None
    preferred_gifts: Optional[List[str]] = None
    required_abilities: Optional[List[str]] = None
    preferred_abilities: Optional[List[str]] = None
    capacity: Optional[int] = Field(None, ge=1)
    current_count: Optional[int] = Field(None, ge=0)
    age_group_preference: Optional[List[str]] = None
    time_commitment: Optional[str] = None
    contact_person: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    status: Optional[OpportunityStatus] = None

    @field_validator(
        "title", "required_gifts", "preferred_gifts", "required_abilities", "preferred_abilities",
        "capacity", "current_count", "age_group_preference", "status",
    )
    @classmethod
    def not_null(cls, v, info):
        # omit a field to leave it unchanged; these columns cannot be cleared
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class MinistryOpportunityOut(MinistryOpportunityBase):
    id: str
    organization_id: str
    contact_email: Optional[str] = None
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {
        'from_attributes': True
    }
