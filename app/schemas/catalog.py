from pydantic import BaseModel
from typing import List


class GiftOut(BaseModel):
    key: str
    name: str
    short_name: str
    definition: str
    scripture: str
    scripture_ref: str
    ministry_options: List[str]
    why_it_matters: str
    icon: str

    model_config = {
        'from_attributes': True
    }


class AbilityOut(BaseModel):
    key: str
    category: str
    display_name: str
    description: str
    ministry_applications: List[str]

    model_config = {
        'from_attributes': True
    }


class QuestionItem(BaseModel):
    code: str
    gift_key: str
    text: str


class QuestionsResponse(BaseModel):
    version: int
    scale_min: int
    scale_max: int
    items: List[QuestionItem]
