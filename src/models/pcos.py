"""
PCOS type and symptom catalogue models.
"""
from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class PCOSCategory(str, Enum):
    """
    PCOS phenotype categories, listed in tie-break priority order.
    """
    INSULIN_RESISTANT = "insulin-resistant"
    INFLAMMATORY = "inflammatory"
    ADRENAL = "adrenal"
    POST_PILL = "post-pill"


class PCOSTypeProfile(BaseModel):
    """
    Caller-facing explanation of a PCOS category.
    """
    id: PCOSCategory
    name: str
    description: str
    common_symptoms: List[str] = Field(..., serialization_alias="commonSymptoms")
    recommendations: List[str]


class Symptom(BaseModel):
    """
    Entry of the self-reported symptom vocabulary.
    """
    id: str
    name: str
    description: str
    category: str = Field(..., pattern="^(physical|mental|cycle)$")
