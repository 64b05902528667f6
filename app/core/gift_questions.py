"""Canonical gift assessment question definitions & mapping.

This module centralizes the QUESTION_ITEMS (code, gift_key, text) and the MAP
(gift_key -> list[question_code]) so both the catalog routes and the scoring
logic share a single authoritative source.

Validation helpers ensure integrity (60 total items, 12 gifts * 5 each, full
coverage, no duplicates). Importing this module will raise if invariants break.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

from app.core.gifts import GIFT_KEYS

QUESTIONS_PER_GIFT = 5
LIKERT_MIN = 1
LIKERT_MAX = 5

# Each tuple: (code, gift_key, text)
QUESTION_ITEMS: List[Tuple[str, str, str]] = [
    ("G01", "LEADERSHIP_ORG", "I enjoy organizing events and bringing people together for a common purpose."),
    ("G02", "TEACHING", "I find great satisfaction in explaining biblical concepts to others."),
    ("G03", "WISDOM_INSIGHT", "I often receive insights about situations that help guide important decisions."),
    ("G04", "PROPHETIC_DISCERNMENT", "I can sense when something is not spiritually right in a situation."),
    ("G05", "EXHORTATION", "I love encouraging others and helping them see their potential."),
    ("G06", "SHEPHERDING", "I feel responsible for the spiritual well-being of people around me."),
    ("G07", "FAITH", "I trust God for outcomes others consider impossible."),
    ("G08", "EVANGELISM", "I look for natural openings to talk about Jesus with people who don't know Him."),
    ("G09", "APOSTLESHIP", "I am energized by starting something new where nothing exists yet."),
    ("G10", "SERVICE_HOSPITALITY", "I notice practical needs and quietly take care of them."),
    ("G11", "MERCY", "I am drawn to people who are hurting or overlooked."),
    ("G12", "GIVING", "I look for opportunities to give beyond what is expected."),
    ("G13", "LEADERSHIP_ORG", "People look to me for direction when plans are unclear."),
    ("G14", "TEACHING", "I enjoy studying Scripture in order to help others understand it."),
    ("G15", "WISDOM_INSIGHT", "Friends seek my counsel when they face difficult choices."),
    ("G16", "PROPHETIC_DISCERNMENT", "I can usually tell whether a message is consistent with God's truth."),
    ("G17", "EXHORTATION", "I help people take practical next steps when they feel stuck."),
    ("G18", "SHEPHERDING", "I follow up with people over months and years, not just once."),
    ("G19", "FAITH", "My confidence in God steadies others during a crisis."),
    ("G20", "EVANGELISM", "I can explain the gospel clearly to someone outside the church."),
    ("G21", "APOSTLESHIP", "I can see how a ministry could be planted in a new community."),
    ("G22", "SERVICE_HOSPITALITY", "I enjoy making guests feel welcome in my home or at church."),
    ("G23", "MERCY", "I am willing to sit with people in their pain without rushing them."),
    ("G24", "GIVING", "I plan my finances so I can support Kingdom work generously."),
    ("G25", "LEADERSHIP_ORG", "I can break a large goal into steps and assign people to them."),
    ("G26", "TEACHING", "People tell me I make complex ideas easy to understand."),
    ("G27", "WISDOM_INSIGHT", "I can apply biblical principles to messy, real-life situations."),
    ("G28", "PROPHETIC_DISCERNMENT", "I sense timely messages God wants His people to hear."),
    ("G29", "EXHORTATION", "My words often lift people out of discouragement."),
    ("G30", "SHEPHERDING", "I want to protect the people in my group from spiritual harm."),
    ("G31", "FAITH", "I keep praying for breakthrough long after others have stopped."),
    ("G32", "EVANGELISM", "I build friendships with non-believers intentionally."),
    ("G33", "APOSTLESHIP", "I enjoy recruiting and equipping teams to launch new work."),
    ("G34", "SERVICE_HOSPITALITY", "I prefer working behind the scenes to being in front of people."),
    ("G35", "MERCY", "I advocate for those who cannot advocate for themselves."),
    ("G36", "GIVING", "I feel joy when my resources meet someone else's need."),
    ("G37", "LEADERSHIP_ORG", "I naturally create systems that help teams work smoothly."),
    ("G38", "TEACHING", "I like preparing lessons or studies for a group."),
    ("G39", "WISDOM_INSIGHT", "I can see the likely consequences of a decision before others do."),
    ("G40", "PROPHETIC_DISCERNMENT", "I am willing to speak hard truth in love when it is needed."),
    ("G41", "EXHORTATION", "I believe in people's potential even when they don't."),
    ("G42", "SHEPHERDING", "I enjoy guiding a small group of people toward spiritual maturity."),
    ("G43", "FAITH", "I step out in obedience before I can see how things will work out."),
    ("G44", "EVANGELISM", "I feel burdened for people who have never heard the gospel."),
    ("G45", "APOSTLESHIP", "I adapt easily to new cultures and environments for the sake of the gospel."),
    ("G46", "SERVICE_HOSPITALITY", "I volunteer quickly when setup, cleanup or logistics help is needed."),
    ("G47", "MERCY", "I feel deep compassion for the sick, grieving and lonely."),
    ("G48", "GIVING", "I notice strategic opportunities to fund ministry impact."),
    ("G49", "LEADERSHIP_ORG", "I can motivate a group to move toward a shared vision."),
    ("G50", "TEACHING", "I want people to apply what they learn, not just hear it."),
    ("G51", "WISDOM_INSIGHT", "I can find a godly way forward when a situation seems unclear."),
    ("G52", "PROPHETIC_DISCERNMENT", "I notice spiritual patterns in a church or group that others miss."),
    ("G53", "EXHORTATION", "People say my feedback both challenges and encourages them."),
    ("G54", "SHEPHERDING", "I notice when someone in my community has drifted away."),
    ("G55", "FAITH", "I believe God will provide even when resources are scarce."),
    ("G56", "EVANGELISM", "I enjoy inviting people to church events and outreach activities."),
    ("G57", "APOSTLESHIP", "I would rather pioneer a ministry than maintain an existing one."),
    ("G58", "SERVICE_HOSPITALITY", "I take care of the details that make gatherings comfortable."),
    ("G59", "MERCY", "I look for practical ways to relieve suffering in my community."),
    ("G60", "GIVING", "I give time, money or possessions cheerfully and without recognition."),
]

MAP: Dict[str, List[str]] = {key: [] for key in GIFT_KEYS}
for _code, _gift_key, _text in QUESTION_ITEMS:
    MAP.setdefault(_gift_key, []).append(_code)

# Derived lookups (useful for scoring logic)
CODE_TO_GIFT: Dict[str, str] = {code: gift for code, gift, _ in QUESTION_ITEMS}
ALL_CODES: List[str] = [code for code, _g, _t in QUESTION_ITEMS]


def _validate_integrity() -> None:
    codes = ALL_CODES
    expected = len(GIFT_KEYS) * QUESTIONS_PER_GIFT
    if len(codes) != expected:
        raise ValueError(f"Expected {expected} items, found {len(codes)}")
    if len(set(codes)) != expected:
        raise ValueError("Duplicate question codes detected")
    unknown = set(MAP) - set(GIFT_KEYS)
    if unknown:
        raise ValueError(f"Questions reference unknown gift keys: {sorted(unknown)}")
    # Each gift exactly QUESTIONS_PER_GIFT
    for gift, lst in MAP.items():
        if len(lst) != QUESTIONS_PER_GIFT:
            raise ValueError(f"Gift {gift} expected {QUESTIONS_PER_GIFT} items, found {len(lst)}")


_validate_integrity()
