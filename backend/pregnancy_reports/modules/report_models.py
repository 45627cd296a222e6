"""
Data model for report extraction.

Absent values are left as None and dropped on serialization
(model_dump(exclude_none=True)), so a field that no pattern matched never
shows up as a zero or an empty object.
"""

import mimetypes
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReportType(str, Enum):
    ULTRASOUND = "ultrasound"
    BLOOD_TEST = "blood_test"
    VITAL_SIGNS = "vital_signs"


class Trimester(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class RiskLevel(str, Enum):
    NORMAL = "normal"
    MILD = "mild"
    URGENT = "urgent"


# ════════════════════════════════════════════════════════════════════════════
# INPUT
# ════════════════════════════════════════════════════════════════════════════

class UploadedReport(BaseModel):
    """A single uploaded report file held in memory."""
    filename: str
    content_type: str = Field(..., description="Declared MIME type")
    data: bytes

    @classmethod
    def from_path(cls, path) -> "UploadedReport":
        # MIME type comes from the extension only; content is never sniffed
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )

    @property
    def is_pdf(self) -> bool:
        return self.content_type == "application/pdf"

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


# ════════════════════════════════════════════════════════════════════════════
# EXTRACTED VALUES
# ════════════════════════════════════════════════════════════════════════════

class HemoglobinReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float
    unit: str = "g/dL"


class BloodPressureReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    systolic: int
    diastolic: int
    unit: str = "mmHg"


class GlucoseReadings(BaseModel):
    model_config = ConfigDict(frozen=True)

    fasting: Optional[float] = None
    one_hour: Optional[float] = None
    two_hour: Optional[float] = None
    unit: str = "mg/dL"


class UltrasoundFindings(BaseModel):
    model_config = ConfigDict(frozen=True)

    fhr: Optional[int] = Field(None, description="Fetal heart rate, bpm")
    afi: Optional[float] = Field(None, description="Amniotic fluid index, cm")
    efw_percentile: Optional[int] = None
    cervical_length: Optional[float] = Field(None, description="cm")
    placenta_position: Optional[str] = None
    gestational_age: Optional[str] = None


class ReportValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    hemoglobin: Optional[HemoglobinReading] = None
    blood_pressure: Optional[BloodPressureReading] = None
    glucose: Optional[GlucoseReadings] = None
    ultrasound: Optional[UltrasoundFindings] = None

    def present_keys(self) -> List[str]:
        return [name for name, value in self if value is not None]


class ExtractedReportData(BaseModel):
    model_config = ConfigDict(frozen=True)

    report_type: ReportType
    values: ReportValues = Field(default_factory=ReportValues)
    gestational_age_reported: Optional[str] = None
    report_date: Optional[str] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class UrgencyVerdict(BaseModel):
    urgent: bool
    reasons: List[str] = Field(default_factory=list)


class ClinicalEvaluation(BaseModel):
    level: RiskLevel
    message: str


# ════════════════════════════════════════════════════════════════════════════
# GESTATIONAL CONTEXT
# ════════════════════════════════════════════════════════════════════════════

class FetalHeartRateRange(BaseModel):
    min: int
    max: int


class GestationalContext(BaseModel):
    week: int
    trimester: Trimester
    trimester_name: str
    baby_size: str
    key_developments: List[str]
    typical_symptoms: List[str]
    normal_fetal_heart_rate: FetalHeartRateRange
    expected_movements: str
    week_description: str


class NormalRanges(BaseModel):
    hemoglobin: str
    blood_pressure: str
    glucose: str
    fetal_heart_rate: str
    afi: str


class ClinicalContextForAI(BaseModel):
    gestational_week: int
    trimester: str
    week_context: str
    normal_ranges: NormalRanges
    development_context: str


# ════════════════════════════════════════════════════════════════════════════
# PIPELINE RESULTS
# ════════════════════════════════════════════════════════════════════════════

class ProcessedReport(BaseModel):
    raw_text: str = Field(..., description="Unsanitized text, for caller-side display only")
    extracted_data: ExtractedReportData
    confidence: float = Field(..., ge=0.0, le=1.0)


class ReportAnalysis(BaseModel):
    report: ProcessedReport
    context: GestationalContext
    urgency: UrgencyVerdict
    evaluations: Dict[str, ClinicalEvaluation] = Field(default_factory=dict)
