from pydantic import BaseModel, Field
from typing import Optional


class OrganizationInviteOut(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    invite_code: str

    model_config = {
        'from_attributes': True
    }


class JoinOrganizationRequest(BaseModel):
    invite_code: str = Field(..., min_length=1, max_length=32)


class JoinOrganizationResponse(BaseModel):
    organization: OrganizationInviteOut
    message: str
