from fastapi import APIRouter
from typing import List, Optional

from app.core.gifts import get_all_gift_content, get_gift_content
from app.core.natural_abilities import NATURAL_ABILITIES, get_abilities_by_category
from app.core.gift_questions import QUESTION_ITEMS, LIKERT_MIN, LIKERT_MAX
from app.exceptions import NotFoundException, ValidationException
from app.schemas.catalog import GiftOut, AbilityOut, QuestionItem, QuestionsResponse
from app.services.gift_scoring import SCORING_VERSION

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/gifts", response_model=List[GiftOut])
def list_gifts():
    return get_all_gift_content()


@router.get("/gifts/{gift_key}", response_model=GiftOut)
def get_gift(gift_key: str):
    gift = get_gift_content(gift_key.upper())
    if not gift:
        raise NotFoundException(f"Unknown gift: {gift_key}")
    return gift


@router.get("/abilities", response_model=List[AbilityOut])
def list_abilities(category: Optional[str] = None):
    if category is None:
        return list(NATURAL_ABILITIES)
    try:
        return get_abilities_by_category(category.upper())
    except ValueError as ve:
        raise ValidationException(str(ve))


@router.get("/questions", response_model=QuestionsResponse)
def list_questions():
    return QuestionsResponse(
        version=SCORING_VERSION,
        scale_min=LIKERT_MIN,
        scale_max=LIKERT_MAX,
        items=[QuestionItem(code=c, gift_key=g, text=t) for c, g, t in QUESTION_ITEMS],
    )
