"""Ministry matching: weighted fit between a person and an opportunity.

``compute_match_score`` is the single source of truth for the percentage
shown on member and admin screens. It is a pure function over plain
collections of catalog keys; everything that touches the database or
builds display text lives in the helpers below it.

Scoring (v1):
  * every required key contributes REQUIRED_WEIGHT to the possible total
    and, when the person has it, to the earned total
  * every preferred key does the same with PREFERRED_WEIGHT
  * score = earned / possible * 100, rounded half-up
  * an opportunity with nothing required or preferred scores 0

Keys are processed as given: a key listed twice is weighted twice, and
keys outside the catalogs simply never match. Callers that want stricter
behaviour validate before persisting (see ``app.routes.ministry_opportunities``).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from app.core.gifts import get_gift_content
from app.core.natural_abilities import get_ability_by_key

REQUIRED_WEIGHT = 10
PREFERRED_WEIGHT = 5
MAX_SCORE = 100


def compute_match_score(
    person_attributes: Iterable[str],
    required_attributes: Sequence[str],
    preferred_attributes: Sequence[str],
) -> int:
    """Return the match percentage (0-100) of a person against one opportunity.

    Rounding is half-up (``0.5`` rounds to ``1``), done in integer arithmetic
    so there is no float tie-break drift: 2/3 -> 67, 1/2 -> 50, 1/8 -> 13.
    """
    have = frozenset(person_attributes)
    earned = 0
    possible = 0

    for key in required_attributes:
        possible += REQUIRED_WEIGHT
        if key in have:
            earned += REQUIRED_WEIGHT

    for key in preferred_attributes:
        possible += PREFERRED_WEIGHT
        if key in have:
            earned += PREFERRED_WEIGHT

    if possible == 0:
        return 0

    # floor(earned * 100 / possible + 1/2)
    return (earned * 2 * MAX_SCORE + possible) // (2 * possible)


def person_attribute_set(gift_keys: Iterable[str], ability_keys: Iterable[str]) -> frozenset:
    """Union of a person's gift keys and natural ability keys."""
    return frozenset(gift_keys) | frozenset(ability_keys)


def _list(value: Optional[Sequence[str]]) -> List[str]:
    return list(value) if value else []


def required_keys(opportunity: Any) -> List[str]:
    return _list(opportunity.required_gifts) + _list(opportunity.required_abilities)


def preferred_keys(opportunity: Any) -> List[str]:
    return _list(opportunity.preferred_gifts) + _list(opportunity.preferred_abilities)


def score_opportunity(person_attributes: Iterable[str], opportunity: Any) -> int:
    """Score a person against an opportunity's gift and ability lists combined.

    ``opportunity`` is anything exposing the four list attributes, usually a
    ``MinistryOpportunity`` row or a schema object.
    """
    return compute_match_score(person_attributes, required_keys(opportunity), preferred_keys(opportunity))


def _label(key: str) -> tuple[str, str]:
    gift = get_gift_content(key)
    if gift:
        return "gift", gift.name
    ability = get_ability_by_key(key)
    if ability:
        return "ability", ability.display_name
    return "attribute", key


def match_reasons(person_attributes: Iterable[str], opportunity: Any) -> List[str]:
    """Human readable reasons for a match, one per matched key, required first."""
    have = frozenset(person_attributes)
    reasons: List[str] = []
    seen: set[tuple[str, str]] = set()
    for tier, keys in (("Required", required_keys(opportunity)), ("Preferred", preferred_keys(opportunity))):
        for key in keys:
            if key not in have or (tier, key) in seen:
                continue
            seen.add((tier, key))
            kind, name = _label(key)
            reasons.append(f"{tier} {kind}: {name}")
    return reasons


@dataclass
class OpportunityMatch:
    opportunity: Any
    match_score: int
    reasons: List[str] = field(default_factory=list)


@dataclass
class CandidateMatch:
    user: Any
    result: Any
    match_score: int
    reasons: List[str] = field(default_factory=list)


def rank_opportunities(
    person_attributes: Iterable[str],
    opportunities: Iterable[Any],
    min_score: int = 0,
    limit: Optional[int] = None,
) -> List[OpportunityMatch]:
    """Score every opportunity for one person, best first.

    Ordering: score desc, then title (case-insensitive) asc.
    """
    have = frozenset(person_attributes)
    matches = []
    for opp in opportunities:
        score = score_opportunity(have, opp)
        if score < min_score:
            continue
        matches.append(OpportunityMatch(opportunity=opp, match_score=score, reasons=match_reasons(have, opp)))
    matches.sort(key=lambda m: (-m.match_score, (m.opportunity.title or "").lower()))
    if limit is not None:
        matches = matches[:limit]
    return matches


def rank_candidates(
    opportunity: Any,
    people: Iterable[tuple[Any, Any, Iterable[str]]],
    min_score: int = 0,
    limit: Optional[int] = None,
) -> List[CandidateMatch]:
    """Score people for one opportunity, best first.

    ``people`` yields ``(user, result, attribute_set)`` triples. Ordering:
    score desc, then the user's display name (case-insensitive) asc.
    """
    matches = []
    for user, result, attrs in people:
        have = frozenset(attrs)
        score = score_opportunity(have, opportunity)
        if score < min_score:
            continue
        matches.append(
            CandidateMatch(user=user, result=result, match_score=score, reasons=match_reasons(have, opportunity))
        )
    matches.sort(key=lambda m: (-m.match_score, (m.user.name or "").lower()))
    if limit is not None:
        matches = matches[:limit]
    return matches
