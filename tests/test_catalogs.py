import pytest

from app.core.gifts import (
    GIFT_KEYS,
    GIFT_CONTENT,
    get_all_gift_content,
    get_gift_content,
    is_gift_key,
)
from app.core.natural_abilities import (
    CATEGORIES,
    NATURAL_ABILITIES,
    get_abilities_by_category,
    get_ability_by_key,
    is_ability_key,
)
from app.core.gift_questions import QUESTION_ITEMS, MAP, CODE_TO_GIFT, QUESTIONS_PER_GIFT


def test_twelve_gifts_in_canonical_order():
    assert len(GIFT_KEYS) == 12
    assert [g.key for g in get_all_gift_content()] == list(GIFT_KEYS)
    assert GIFT_KEYS[0] == "LEADERSHIP_ORG"
    assert GIFT_KEYS[-1] == "GIVING"


def test_gift_lookup():
    teaching = get_gift_content("TEACHING")
    assert teaching.name == "Teaching"
    assert teaching.scripture_ref == "Ephesians 4:11-12"
    assert len(teaching.ministry_options) == 5
    assert get_gift_content("PROPHECY") is None
    assert is_gift_key("MERCY")
    assert not is_gift_key("mercy")


def test_gift_catalog_is_read_only():
    with pytest.raises(TypeError):
        GIFT_CONTENT["NEW_GIFT"] = None
    with pytest.raises(AttributeError):
        get_gift_content("FAITH").name = "Changed"


def test_abilities_catalog_shape():
    assert len(NATURAL_ABILITIES) == 50
    keys = [a.key for a in NATURAL_ABILITIES]
    assert len(set(keys)) == len(keys)
    for a in NATURAL_ABILITIES:
        assert a.category in CATEGORIES
        assert a.key.startswith(a.category + "_")
        assert a.ministry_applications


def test_abilities_by_category():
    sports = get_abilities_by_category("SPORTS")
    assert [a.key for a in sports] == ["SPORTS_ATHLETE", "SPORTS_COACH", "SPORTS_OFFICIAL"]
    assert len(get_abilities_by_category("ARTS")) == 19
    assert len(get_abilities_by_category("SKILL")) == 28
    with pytest.raises(ValueError):
        get_abilities_by_category("COOKING")


def test_ability_lookup():
    guitar = get_ability_by_key("ARTS_GUITAR")
    assert guitar.display_name == "Guitar"
    assert "Worship team" in guitar.ministry_applications
    assert get_ability_by_key("ARTS_KAZOO") is None
    assert is_ability_key("SKILL_COOKING")
    assert not is_ability_key("TEACHING")


def test_questions_cover_every_gift_evenly():
    assert len(QUESTION_ITEMS) == 60
    assert set(MAP) == set(GIFT_KEYS)
    for gift, codes in MAP.items():
        assert len(codes) == QUESTIONS_PER_GIFT
        for code in codes:
            assert CODE_TO_GIFT[code] == gift
