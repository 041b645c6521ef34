"""
Derived user-state descriptors used to drive recommendation rules.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from src.models.pcos import PCOSCategory


class StressLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CycleRegularity(str, Enum):
    REGULAR = "regular"
    IRREGULAR = "irregular"


class ExerciseCapacity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MentalHealthStatus(str, Enum):
    STABLE = "stable"
    CONCERNING = "concerning"


class AnalysisResult(BaseModel):
    """
    Snapshot of a user's state computed fresh for a single request.

    Defaults are the safe descriptors used whenever a signal is missing.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pcos_type: PCOSCategory = Field(PCOSCategory.INSULIN_RESISTANT, alias="pcosType")
    stress_level: StressLevel = Field(StressLevel.MEDIUM, alias="stressLevel")
    cycle_regularity: CycleRegularity = Field(CycleRegularity.REGULAR, alias="cycleRegularity")
    exercise_capacity: ExerciseCapacity = Field(ExerciseCapacity.MEDIUM, alias="exerciseCapacity")
    mental_health_status: MentalHealthStatus = Field(
        MentalHealthStatus.STABLE, alias="mentalHealthStatus"
    )
