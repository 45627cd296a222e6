"""
Myth/fact query classifier

Scores a free-text question against per-category and per-region keyword
lists (substring match on the lowercased query), then picks matching
records from the myth dataset, preferring ones close to the patient's week.
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from .data_loader import Category, MythFact, Region

logger = logging.getLogger(__name__)


CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "Nutrition": [
        "eat", "food", "drink", "diet", "fruit", "vegetable", "papaya", "pineapple",
        "fish", "meat", "milk", "coffee", "tea", "caffeine", "sugar", "spicy",
        "saffron", "ghee", "dates", "almonds", "eggs", "chocolate", "honey",
        "watermelon", "coconut", "crab", "lamb", "duck", "rabbit", "vitamin",
        "nutrient", "calorie", "hungry", "craving", "herbal",
    ],
    "Activity": [
        "exercise", "walk", "run", "swim", "yoga", "lift", "carry", "bend",
        "stretch", "stairs", "travel", "fly", "drive", "sex", "intercourse",
        "work", "computer", "phone", "microwave", "bath", "shower", "hot tub",
        "scissors", "clean", "move", "furniture", "funeral", "eclipse",
    ],
    "Body Changes": [
        "weight", "belly", "bump", "show", "stretch mark", "skin", "hair",
        "glow", "swelling", "feet", "ankles", "back pain", "spotting",
        "bleeding", "linea nigra", "heartburn", "nausea", "vomit", "morning sickness",
    ],
    "Emotions": [
        "stress", "anxiety", "worried", "sad", "cry", "happy", "mood",
        "depressed", "nervous", "feel", "emotion", "pregnancy brain", "forget",
    ],
    "Labor": [
        "labor", "delivery", "birth", "contraction", "water break", "due date",
        "induce", "induction", "c-section", "cesarean", "breech", "drop",
        "mucus plug", "membrane", "dilate", "cervix", "preterm", "viability",
    ],
    "Gender Myths": [
        "boy", "girl", "gender", "sex", "heart rate", "belly shape", "high",
        "low", "carrying", "craving sweet", "craving salty", "chinese calendar",
        "moody", "fair", "dark", "complexion",
    ],
    "Sleep/Posture": [
        "sleep", "side", "back", "left", "right", "pillow", "position",
        "posture", "sit", "stand", "legs crossed", "rest", "bed rest",
    ],
    "General": [
        "test", "pregnant", "safe", "dangerous", "harm", "baby", "trimester",
        "advice", "old wives", "myth", "true", "false", "believe",
    ],
}

REGION_KEYWORDS: Dict[str, List[str]] = {
    "South Asia": [
        "india", "indian", "pakistan", "bangladesh", "nepal", "sri lanka",
        "saffron", "ghee", "ayurveda", "papaya", "coconut", "evil eye",
        "fair skin", "almond", "eclipse",
    ],
    "Middle East": [
        "arab", "middle east", "dates", "honey", "halal", "evil eye",
        "islamic", "muslim", "funeral",
    ],
    "Western": [
        "america", "usa", "uk", "europe", "western", "modern", "science",
        "doctor", "hospital",
    ],
    "East Asia": [
        "china", "chinese", "japan", "japanese", "korea", "korean",
        "cold food", "warm food", "yin", "yang", "acupuncture", "duck",
        "rabbit", "crab", "white foods", "calendar",
    ],
    "Global": [],
}

MAX_MATCHES = 5
NEARBY_WEEKS = 4


class ClassificationResult(BaseModel):
    category: Category
    confidence: float
    region_hint: Region
    matched_myths: List[MythFact]


# ════════════════════════════════════════════════════════════════════════════
# LOOKUPS
# ════════════════════════════════════════════════════════════════════════════

def search_myths(myths: List[MythFact], query: str) -> List[MythFact]:
    q = query.lower()
    return [
        m for m in myths
        if q in m.myth.lower()
        or q in m.medical_fact.lower()
        or q in m.category.lower()
        or q in m.belief_reason.lower()
    ]


def get_myths_for_week(myths: List[MythFact], week: int) -> List[MythFact]:
    return [m for m in myths if m.week == week]


def get_myths_by_category(myths: List[MythFact], category: str) -> List[MythFact]:
    return [m for m in myths if m.category == category]


def get_myths_by_region(myths: List[MythFact], region: str) -> List[MythFact]:
    return [m for m in myths if m.region == region]


# ════════════════════════════════════════════════════════════════════════════
# CLASSIFICATION
# ════════════════════════════════════════════════════════════════════════════

def classify_user_query(
    query: str,
    myths: List[MythFact],
    current_week: Optional[int] = None,
) -> ClassificationResult:
    lower_query = query.lower()

    category_scores = {
        category: sum(1 for k in keywords if k in lower_query)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }

    # max() keeps the first category on ties
    best_category = max(category_scores, key=category_scores.get)
    max_score = category_scores[best_category]

    # keywords listed under several categories count once per category
    total_hits = sum(category_scores.values())
    if total_hits > 0:
        confidence = min(max_score / total_hits * 0.7 + 0.3, 1.0)
    else:
        confidence = 0.5

    region_hint = "Global"
    for region, keywords in REGION_KEYWORDS.items():
        if any(k in lower_query for k in keywords):
            region_hint = region
            break

    matched = search_myths(myths, query)
    if not matched:
        matched = get_myths_by_category(myths, best_category)

    if current_week is not None:
        same_week = [m for m in matched if m.week == current_week]
        if same_week:
            matched = same_week
        else:
            nearby = [m for m in matched if abs(m.week - current_week) <= NEARBY_WEEKS]
            if nearby:
                matched = nearby

    logger.debug(
        f"Query classified as {best_category} ({confidence:.2f}), region={region_hint}, "
        f"{len(matched)} candidate myth(s)"
    )

    return ClassificationResult(
        category=best_category,
        confidence=confidence,
        region_hint=region_hint,
        matched_myths=matched[:MAX_MATCHES],
    )


def get_related_myths(myth: MythFact, myths: List[MythFact]) -> List[MythFact]:
    related = [
        m for m in myths
        if m.id != myth.id and (m.category == myth.category or m.region == myth.region)
    ]
    return related[:3]


def get_trending_myths(myths: List[MythFact]) -> List[MythFact]:
    high = [m for m in myths if m.risk_level == "High"]
    medium = [m for m in myths if m.risk_level == "Medium"]
    return high[:2] + medium[:3]


def get_popular_myths_by_week_range(
    myths: List[MythFact], start_week: int, end_week: int
) -> List[MythFact]:
    return [m for m in myths if start_week <= m.week <= end_week]


def get_myth_stats(myths: List[MythFact]) -> dict:
    by_category = {category: 0 for category in CATEGORY_KEYWORDS}
    by_region = {"Global": 0, "South Asia": 0, "Middle East": 0, "Western": 0, "East Asia": 0}
    by_risk = {"Low": 0, "Medium": 0, "High": 0}

    for m in myths:
        by_category[m.category] += 1
        by_region[m.region] += 1
        by_risk[m.risk_level] += 1

    return {
        "total": len(myths),
        "by_category": by_category,
        "by_region": by_region,
        "by_risk": by_risk,
    }
