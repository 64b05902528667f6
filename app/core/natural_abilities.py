"""Natural abilities and skills catalog used for ministry placement.

Each ability: (key, category, display_name, description, ministry_applications).
Importing this module validates the catalog (unique keys, known categories,
category-prefixed keys) and raises on any violation.
"""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Optional, Tuple

ABILITY_CATALOG_VERSION = 1

CATEGORIES: Tuple[str, ...] = ("ARTS", "SKILL", "SPORTS")


@dataclass(frozen=True)
class NaturalAbility:
    key: str
    category: str
    display_name: str
    description: str
    ministry_applications: Tuple[str, ...]


ABILITY_ITEMS: List[Tuple[str, str, str, str, Tuple[str, ...]]] = [
    # Arts
    ("ARTS_ARTIST", "ARTS", "Artist", "Visual arts, drawing, painting, design",
     ("Church decorations", "Bulletin graphics", "Event promotional materials", "Children ministry crafts")),
    ("ARTS_BASS_GUITAR", "ARTS", "Bass Guitar", "Bass guitar performance and music",
     ("Worship team", "Youth ministry music", "Special events")),
    ("ARTS_DANCE", "ARTS", "Dance", "Dance performance and choreography",
     ("Worship dance", "Youth ministry", "Special celebrations", "Cultural ministry")),
    ("ARTS_DIRECTOR", "ARTS", "Director", "Creative direction and production management",
     ("Drama ministry", "Easter/Christmas productions", "Youth programs", "Event coordination")),
    ("ARTS_DRAMA", "ARTS", "Drama", "Acting and theatrical performance",
     ("Drama team", "Children ministry skits", "Holiday productions", "Evangelistic theater")),
    ("ARTS_DRUMS", "ARTS", "Drums", "Percussion and rhythm instruments",
     ("Worship team", "Youth band", "Special events music")),
    ("ARTS_GUITAR", "ARTS", "Guitar", "Guitar performance and music",
     ("Worship team", "Youth ministry", "Small group worship", "Acoustic ministry")),
    ("ARTS_KEYBOARD_PIANO", "ARTS", "Keyboard/Piano", "Piano and keyboard performance",
     ("Worship team", "Children ministry music", "Special events", "Accompaniment")),
    ("ARTS_LEAD_WORSHIP", "ARTS", "Lead Worship", "Leading congregational worship and music ministry",
     ("Worship leader", "Youth worship", "Small group worship", "Special services")),
    ("ARTS_LIGHTING", "ARTS", "Lighting", "Stage and event lighting design",
     ("Production team", "Special events", "Holiday services", "Drama productions")),
    ("ARTS_MEDIA_GRAPHICS", "ARTS", "Media/Graphics", "Digital media creation and graphic design",
     ("Marketing materials", "Social media", "Presentation slides", "Website design")),
    ("ARTS_MUSIC_OTHER", "ARTS", "Music-Other", "Other musical instruments and talents",
     ("Worship team", "Special music", "Cultural ministry", "Children programs")),
    ("ARTS_PHOTOGRAPHY", "ARTS", "Photography", "Photography and visual documentation",
     ("Event photography", "Social media content", "Ministry documentation", "Website images")),
    ("ARTS_PRODUCTION", "ARTS", "Production", "Event and media production coordination",
     ("Service production", "Special events", "Media ministry", "Technical coordination")),
    ("ARTS_SLIDES", "ARTS", "Slides", "Presentation and visual media creation",
     ("Service presentations", "Teaching materials", "Event visuals", "Announcement slides")),
    ("ARTS_SOUND_TECH", "ARTS", "Sound Tech", "Audio engineering and sound systems",
     ("Audio/Visual team", "Service production", "Special events", "Recording ministry")),
    ("ARTS_VIDEO", "ARTS", "Video", "Video production and editing",
     ("Service recording", "Ministry videos", "Social media content", "Training materials")),
    ("ARTS_VOCALIST", "ARTS", "Vocalist", "Vocal performance and singing",
     ("Worship team", "Choir", "Special music", "Youth ministry music")),
    ("ARTS_WRITER", "ARTS", "Writer", "Creative and content writing",
     ("Newsletter content", "Social media", "Drama scripts", "Teaching materials")),

    # Skills
    ("SKILL_BUS_DRIVER", "SKILL", "Bus Driver", "Commercial driving and transportation",
     ("Youth trips", "Senior ministry outings", "Mission trips", "Event transportation")),
    ("SKILL_BUSINESS_MANAGEMENT", "SKILL", "Business Management", "Business operations and management experience",
     ("Ministry leadership", "Event planning", "Team coordination", "Strategic planning")),
    ("SKILL_CARPENTRY", "SKILL", "Carpentry", "Woodworking and construction skills",
     ("Building maintenance", "Set construction", "Mission trips", "Facility improvements")),
    ("SKILL_CHILD_CARE", "SKILL", "Child Care", "Experience caring for children",
     ("Nursery ministry", "Children church", "VBS", "Youth programs")),
    ("SKILL_CLEANING", "SKILL", "Cleaning", "Cleaning and maintenance expertise",
     ("Facility maintenance", "Event setup/cleanup", "Community service", "Mission trips")),
    ("SKILL_CONSTRUCTION", "SKILL", "Construction", "Construction and building trades",
     ("Building projects", "Mission trips", "Facility improvements", "Community outreach")),
    ("SKILL_COOKING", "SKILL", "Cooking", "Culinary skills and food preparation",
     ("Fellowship meals", "Special events", "Hospitality ministry", "Community dinners")),
    ("SKILL_COUNSELING", "SKILL", "Counseling", "Professional counseling and therapy background",
     ("Pastoral care", "Support groups", "Crisis intervention", "Marriage ministry")),
    ("SKILL_CUSTOMER_SERVICE", "SKILL", "Customer Service", "Customer relations and service experience",
     ("Welcome team", "Guest services", "Information desk", "Phone ministry")),
    ("SKILL_EDUCATION", "SKILL", "Education", "Teaching and educational background",
     ("Sunday school", "Adult education", "Youth teaching", "Leadership training")),
    ("SKILL_ELECTRICIAN", "SKILL", "Electrician", "Electrical work and systems",
     ("Building maintenance", "Audio/Visual setup", "Facility improvements", "Mission trips")),
    ("SKILL_EVENT_COORDINATION", "SKILL", "Event Coordination", "Event planning and coordination experience",
     ("Special events", "Conferences", "Retreats", "Wedding coordination")),
    ("SKILL_FINANCIAL", "SKILL", "Financial", "Finance and accounting expertise",
     ("Financial ministry", "Stewardship teaching", "Budget planning", "Administrative support")),
    ("SKILL_HOSPITALITY_INDUSTRY", "SKILL", "Hospitality Industry", "Professional hospitality experience",
     ("Guest services", "Event hospitality", "Fellowship coordination", "Retreat planning")),
    ("SKILL_MARKETING_COMM", "SKILL", "Marketing/Communications", "Marketing and communications background",
     ("Social media ministry", "Marketing materials", "Community outreach", "Public relations")),
    ("SKILL_MECHANIC", "SKILL", "Mechanic", "Automotive and mechanical repair",
     ("Vehicle maintenance", "Mission trip preparation", "Community service", "Practical assistance")),
    ("SKILL_MECHANICAL", "SKILL", "Mechanical", "General mechanical skills and repair",
     ("Building maintenance", "Equipment repair", "Mission trips", "Community service")),
    ("SKILL_MEDIA_GRAPHICS", "SKILL", "Media/Graphics", "Media production and graphic design",
     ("Marketing materials", "Website design", "Social media", "Presentation graphics")),
    ("SKILL_MEDICAL", "SKILL", "Medical", "Healthcare and medical background",
     ("Health ministry", "Mission trips", "Senior ministry", "Crisis response")),
    ("SKILL_OFFICE", "SKILL", "Office", "Administrative and office management",
     ("Administrative support", "Data management", "Office coordination", "Communication")),
    ("SKILL_PAINTER", "SKILL", "Painter", "Painting and finishing work",
     ("Building maintenance", "Facility improvements", "Mission trips", "Set design")),
    ("SKILL_PEOPLE", "SKILL", "People Skills", "Strong interpersonal and relationship skills",
     ("Pastoral care", "Small group leadership", "Welcome ministry", "Counseling support")),
    ("SKILL_PROJECT_MANAGEMENT", "SKILL", "Project Management", "Project planning and management expertise",
     ("Ministry coordination", "Special projects", "Team leadership", "Strategic planning")),
    ("SKILL_SECURITY", "SKILL", "Security", "Security and safety expertise",
     ("Church security", "Event safety", "Children protection", "Emergency response")),
    ("SKILL_SETUP_TEARDOWN", "SKILL", "Setup/Teardown", "Event setup and logistics coordination",
     ("Event logistics", "Service preparation", "Special events", "Facility coordination")),
    ("SKILL_SPA_SERVICES", "SKILL", "Spa Services", "Wellness and spa service background",
     ("Women ministry", "Retreat coordination", "Wellness ministry", "Self-care programs")),
    ("SKILL_TECH_COMPUTERS", "SKILL", "Technology/Computers", "Information technology and computer skills",
     ("IT support", "Website management", "Database management", "Tech troubleshooting")),
    ("SKILL_TRANSLATOR", "SKILL", "Translator", "Language translation and interpretation",
     ("Multicultural ministry", "Mission support", "Community outreach", "International ministry")),

    # Sports
    ("SPORTS_ATHLETE", "SPORTS", "Athlete", "Athletic performance and sports experience",
     ("Sports ministry", "Youth athletics", "Community sports leagues", "Fitness ministry")),
    ("SPORTS_COACH", "SPORTS", "Coach", "Sports coaching and team leadership",
     ("Youth sports", "Community athletics", "Leadership development", "Mentoring programs")),
    ("SPORTS_OFFICIAL", "SPORTS", "Official/Referee", "Sports officiating and rules expertise",
     ("Youth sports", "Community leagues", "Sports camps", "Athletic coordination")),
]

NATURAL_ABILITIES: Tuple[NaturalAbility, ...] = tuple(NaturalAbility(*item) for item in ABILITY_ITEMS)

ABILITIES_BY_KEY: MappingProxyType = MappingProxyType({a.key: a for a in NATURAL_ABILITIES})


def is_ability_key(key: str) -> bool:
    return key in ABILITIES_BY_KEY


def get_ability_by_key(key: str) -> Optional[NaturalAbility]:
    return ABILITIES_BY_KEY.get(key)


def get_abilities_by_category(category: str) -> List[NaturalAbility]:
    """Abilities for one category, in catalog order.

    Raises ValueError for an unknown category so callers can surface a 400
    rather than silently returning an empty list.
    """
    if category not in CATEGORIES:
        raise ValueError(f"Unknown ability category: {category}")
    return [a for a in NATURAL_ABILITIES if a.category == category]


def _validate_integrity() -> None:
    keys = [a.key for a in NATURAL_ABILITIES]
    if len(set(keys)) != len(keys):
        raise ValueError("Duplicate natural ability keys detected")
    for a in NATURAL_ABILITIES:
        if a.category not in CATEGORIES:
            raise ValueError(f"{a.key}: unknown category {a.category}")
        if not a.key.startswith(a.category + "_"):
            raise ValueError(f"{a.key}: key must be prefixed with its category")
        if not a.ministry_applications:
            raise ValueError(f"{a.key}: at least one ministry application required")


_validate_integrity()
