"""
Request models describing the user signals supplied by the caller.

All field names accept the camelCase keys sent by the web client as well
as their snake_case names.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SignalModel(BaseModel):
    """Base for request payloads; unknown keys are tolerated."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UserProfile(SignalModel):
    """
    Self-reported profile data relevant to the analyzer.

    Values outside the known vocabulary are kept and ignored by the
    analyzer rather than rejected.
    """
    age: Optional[int] = None
    cycle_length: Optional[int] = Field(None, alias="cycleLength")
    energy_level: Optional[str] = Field(None, alias="energyLevel")
    diagnosed_with_pcos: Optional[bool] = Field(None, alias="diagnosedWithPCOS")


class CycleRecord(SignalModel):
    start_date: date = Field(..., alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")


class CycleSnapshot(SignalModel):
    """
    Cycle history plus optional self-reported regularity.

    Clients either send a regularity descriptor or a boolean irregular flag.
    """
    cycles: List[CycleRecord] = Field(default_factory=list)
    regularity: Optional[str] = None
    irregular: Optional[bool] = None
    last_period: Optional[date] = Field(None, alias="lastPeriod")

    @property
    def start_dates(self) -> List[date]:
        """Distinct cycle start dates in chronological order."""
        return sorted({cycle.start_date for cycle in self.cycles})


class MoodEntry(SignalModel):
    mood: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    notes: Optional[str] = None


class MoodSnapshot(SignalModel):
    """
    Mood log entries plus an optional summary used when no entries are logged.
    """
    entries: List[MoodEntry] = Field(default_factory=list)
    average_mood: Optional[str] = Field(None, alias="averageMood")
    stress_level: Optional[str] = Field(None, alias="stressLevel")


class JournalEntry(SignalModel):
    content: Optional[str] = ""
    mood: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class RecommendationRequest(SignalModel):
    """
    Body of the recommendations endpoint.

    recentSymptoms is the only required key; an empty list is valid. The
    other signals may be omitted or null and fall back to analyzer defaults.
    """
    user_profile: Optional[UserProfile] = Field(None, alias="userProfile")
    recent_symptoms: List[str] = Field(..., alias="recentSymptoms")
    cycle_data: Optional[CycleSnapshot] = Field(None, alias="cycleData")
    mood_data: Optional[MoodSnapshot] = Field(None, alias="moodData")
    journal_entries: Optional[List[JournalEntry]] = Field(None, alias="journalEntries")


class SymptomAnalysisRequest(SignalModel):
    symptoms: List[str]
    user_profile: Optional[Dict[str, Any]] = Field(None, alias="userProfile")


class SymptomAnalysisResponse(BaseModel):
    pcos_type: str = Field(..., serialization_alias="pcosType")
    confidence: float = Field(..., ge=0.0, le=1.0)
    scores: Dict[str, int]
    profile: Dict[str, Any]
    symptoms: List[Dict[str, Any]] = Field(default_factory=list)
    generated_at: datetime
    user_id: str
