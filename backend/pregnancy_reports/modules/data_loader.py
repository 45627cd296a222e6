import json
import logging
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from ..config import settings

logger = logging.getLogger(__name__)


Category = Literal[
    "Nutrition", "Activity", "Body Changes", "Emotions",
    "Labor", "Gender Myths", "Sleep/Posture", "General",
]
Region = Literal["South Asia", "Middle East", "Western", "East Asia", "Global"]
MythRiskLevel = Literal["Low", "Medium", "High"]


class MedicalSource(BaseModel):
    org: str
    reference: str


class MythFact(BaseModel):
    id: str
    week: int
    category: Category
    region: Region
    myth: str
    belief_reason: str
    medical_fact: str
    risk_level: MythRiskLevel
    medical_guidance: str
    sources: List[MedicalSource] = Field(default_factory=list)
    actionable_advice: str


def load_myths(data_file: Optional[str] = None) -> List[MythFact]:
    data_file = data_file or settings.MYTHS_DATA_FILE
    if not Path(data_file).exists():
        logger.warning(f"Myth dataset not found: {data_file}")
        return []

    try:
        with open(data_file, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f"Myth dataset {data_file} is not valid JSON: {e}")
        return []

    return _convert_records(records)


def _convert_records(records: list) -> List[MythFact]:
    myths = []

    for record in records:
        try:
            myths.append(MythFact.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping myth record {record.get('id', '?')}: {e.error_count()} error(s)")

    return myths
