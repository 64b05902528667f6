import pytest

from app.core.gift_questions import MAP
from app.services.gift_scoring import (
    validate_answers,
    score_answers,
    score_spiritual_gifts,
    calculate_score_percentage,
    GIFT_MAX_SCORES,
)
from tests.conftest import build_answers


def test_validate_answers_ok():
    assert validate_answers(build_answers()) == []


def test_validate_answers_missing():
    answers = build_answers()
    del answers["G01"]
    errors = validate_answers(answers)
    assert any("Missing items: G01" in e for e in errors)


def test_validate_answers_extraneous():
    answers = build_answers()
    answers["Q99"] = 3
    errors = validate_answers(answers)
    assert any("Unexpected items: Q99" in e for e in errors)


@pytest.mark.parametrize("bad", [0, 6, -1])
def test_validate_answers_out_of_range(bad):
    answers = build_answers()
    answers["G02"] = bad
    errors = validate_answers(answers)
    assert any("Out-of-range" in e and "G02" in e for e in errors)


def test_max_scores_per_gift():
    assert all(v == 25 for v in GIFT_MAX_SCORES.values())


def test_calculate_score_percentage():
    assert calculate_score_percentage(25, "TEACHING") == 100
    assert calculate_score_percentage(15, "TEACHING") == 60
    assert calculate_score_percentage(5, max_possible=8) == 63  # 62.5 rounds up
    assert calculate_score_percentage(10) == 40


def test_score_answers_totals_and_top3():
    answers = build_answers(default=2, overrides={"MERCY": 5, "TEACHING": 4, "FAITH": 3})
    scored = score_answers(answers)
    assert scored["totals"]["MERCY"] == 25
    assert scored["totals"]["TEACHING"] == 20
    assert scored["totals"]["GIVING"] == 10
    assert scored["top3"] == ["MERCY", "TEACHING", "FAITH"]
    assert scored["ranked"][0] == {"gift_key": "MERCY", "score": 25, "percentage": 100}
    assert len(scored["ranked"]) == 12


def test_ties_broken_by_catalog_order():
    answers = build_answers(default=3, overrides={"GIVING": 5, "TEACHING": 5, "EVANGELISM": 5, "LEADERSHIP_ORG": 5})
    scored = score_answers(answers)
    # all four tie at 25; catalog order is LEADERSHIP_ORG, TEACHING, ..., EVANGELISM, ..., GIVING
    assert scored["top3"] == ["LEADERSHIP_ORG", "TEACHING", "EVANGELISM"]


def test_score_single_answer_changes_only_its_gift():
    answers = build_answers(default=1)
    code = MAP["APOSTLESHIP"][0]
    answers[code] = 5
    scored = score_answers(answers)
    assert scored["totals"]["APOSTLESHIP"] == 9
    assert scored["top3"][0] == "APOSTLESHIP"


def test_score_spiritual_gifts_validation_error():
    with pytest.raises(ValueError):
        score_spiritual_gifts({"G01": 1})  # incomplete
