"""Spiritual gifts assessment scoring (v1).

Single source of truth: imports MAP (gift_key -> codes) from
``app.core.gift_questions`` to avoid drift. Scores are computed purely from
the submitted answer dict keyed by question code (G01..G60), 1-5 Likert.
"""
from typing import Dict, List, Optional

from app.core.gifts import GIFT_KEYS
from app.core.gift_questions import MAP, ALL_CODES, LIKERT_MIN, LIKERT_MAX

SCORING_VERSION = 1
SCORING_ALGORITHM = "likert_sum_v1"

GIFT_MAX_SCORES: Dict[str, int] = {gift: LIKERT_MAX * len(codes) for gift, codes in MAP.items()}
_DEFAULT_MAX_SCORE = 25

_CATALOG_ORDER = {key: i for i, key in enumerate(GIFT_KEYS)}


def validate_answers(answers: Dict[str, int]) -> List[str]:
    """Return list of validation error messages (empty if valid)."""
    errors: List[str] = []
    known = set(ALL_CODES)
    missing = [q for q in ALL_CODES if q not in answers]
    if missing:
        errors.append(f"Missing items: {', '.join(missing)}")
    extraneous = sorted(k for k in answers.keys() if k not in known)
    if extraneous:
        errors.append(f"Unexpected items: {', '.join(extraneous)}")
    out_of_range = sorted(
        k for k, v in answers.items()
        if k in known and (not isinstance(v, int) or isinstance(v, bool) or v < LIKERT_MIN or v > LIKERT_MAX)
    )
    if out_of_range:
        errors.append(f"Out-of-range ({LIKERT_MIN}-{LIKERT_MAX}) values: {', '.join(out_of_range)}")
    return errors


def calculate_score_percentage(score: int, gift_key: Optional[str] = None, max_possible: Optional[int] = None) -> int:
    max_score = max_possible or (GIFT_MAX_SCORES.get(gift_key) if gift_key else None) or _DEFAULT_MAX_SCORE
    # half-up, matching the ministry match percentages
    return (score * 200 + max_score) // (2 * max_score)


def score_answers(answers: Dict[str, int]) -> Dict:
    """Compute per-gift totals and the top three gifts.

    Returns structure:
    {
      "version": 1,
      "scoring_algorithm": "likert_sum_v1",
      "totals": {gift_key: int},
      "ranked": [{"gift_key": key, "score": int, "percentage": int}],
      "top3": [key, key, key]
    }
    Ranking is score desc with ties broken by catalog order.
    """
    totals: Dict[str, int] = {}
    for gift in GIFT_KEYS:
        totals[gift] = sum(answers.get(code, 0) for code in MAP[gift])
    ordered = sorted(GIFT_KEYS, key=lambda g: (-totals[g], _CATALOG_ORDER[g]))
    ranked = [
        {"gift_key": g, "score": totals[g], "percentage": calculate_score_percentage(totals[g], g)}
        for g in ordered
    ]
    return {
        "version": SCORING_VERSION,
        "scoring_algorithm": SCORING_ALGORITHM,
        "totals": totals,
        "ranked": ranked,
        "top3": ordered[:3],
    }


def score_spiritual_gifts(answers: Dict[str, int]) -> Dict:
    errors = validate_answers(answers)
    if errors:
        raise ValueError("; ".join(errors))
    return score_answers(answers)
