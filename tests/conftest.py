"""
Pytest configuration and shared fixtures.
"""
import json
import pytest
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from src.models.analysis import AnalysisResult
from src.models.signals import (
    CycleRecord,
    CycleSnapshot,
    JournalEntry,
    MoodEntry,
    MoodSnapshot,
    UserProfile
)

@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by Powertools decorators."""
    function_name: str = "ovulacare-insights-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:ovulacare-insights-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a fake Lambda context."""
    return FakeLambdaContext()

def build_event(body: Any = None, user_id: Optional[str] = "user-123") -> Dict[str, Any]:
    """Build an API Gateway proxy event with an optional authenticated user."""
    event = {
        "httpMethod": "POST",
        "path": "/recommendations",
        "body": body if isinstance(body, str) or body is None else json.dumps(body),
        "requestContext": {}
    }
    if user_id is not None:
        event["requestContext"]["authorizer"] = {"claims": {"sub": user_id}}
    return event

@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events."""
    return build_event

@pytest.fixture
def default_analysis() -> AnalysisResult:
    """Analysis built entirely from safe defaults."""
    return AnalysisResult()

@pytest.fixture
def regular_cycle_data() -> CycleSnapshot:
    """Create five cycles starting every 28 days."""
    return CycleSnapshot(cycles=[
        CycleRecord(start_date=date(2024, 1, 1) + timedelta(days=i * 28))
        for i in range(5)
    ])

@pytest.fixture
def irregular_cycle_data() -> CycleSnapshot:
    """Create cycles of 20, 34, 21 and 33 days."""
    return CycleSnapshot(cycles=[
        CycleRecord(start_date=date(2024, 1, 1)),
        CycleRecord(start_date=date(2024, 1, 21)),
        CycleRecord(start_date=date(2024, 2, 24)),
        CycleRecord(start_date=date(2024, 3, 16)),
        CycleRecord(start_date=date(2024, 4, 18))
    ])

def mood_log(moods: List[str], start: datetime = datetime(2024, 3, 1, 9, 0)) -> MoodSnapshot:
    """Create one mood entry per day starting at start."""
    return MoodSnapshot(entries=[
        MoodEntry(mood=mood, created_at=start + timedelta(days=i))
        for i, mood in enumerate(moods)
    ])

@pytest.fixture
def stressed_mood_data() -> MoodSnapshot:
    """Create a week of mostly anxious or frustrated moods."""
    return mood_log(["anxious", "frustrated", "calm", "anxious", "stressed", "tired", "anxious"])

@pytest.fixture
def negative_journal_entries() -> List[JournalEntry]:
    """Create journal entries dominated by negative sentiment."""
    return [
        JournalEntry(content="Feeling overwhelmed and exhausted", mood="anxious"),
        JournalEntry(content="Another hard day", mood="sad"),
        JournalEntry(content="Cried a lot, so tired of this"),
        JournalEntry(content="A good walk helped a bit", mood="hopeful")
    ]

@pytest.fixture
def low_energy_profile() -> UserProfile:
    """Create a profile reporting low energy."""
    return UserProfile(age=29, cycle_length=34, energy_level="low")

@pytest.fixture
def mood_snapshot():
    """Factory for daily mood logs."""
    return mood_log
