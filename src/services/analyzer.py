"""
Service module deriving coarse user-state descriptors from raw signals.

Every descriptor is a pure function of its inputs and falls back to a safe
default (medium stress, regular cycle, medium exercise capacity, stable
mental health) when its signal is missing, so analysis never blocks
recommendation generation.

Typical usage:
    request = RecommendationRequest(**body)
    analysis = analyze(
        request.user_profile,
        request.recent_symptoms,
        request.cycle_data,
        request.mood_data,
        request.journal_entries
    )
"""
from typing import Iterable, List, Optional, Sequence, TypeVar
from datetime import datetime, timedelta, timezone
from statistics import stdev

from aws_lambda_powertools import Logger

from src.models.analysis import (
    AnalysisResult,
    CycleRegularity,
    ExerciseCapacity,
    MentalHealthStatus,
    StressLevel
)
from src.models.chat import Sentiment
from src.models.signals import (
    CycleSnapshot,
    JournalEntry,
    MoodSnapshot,
    UserProfile
)
from src.services.classifier import classify, recognized_symptoms
from src.services.sentiment import analyze_sentiment
from src.services.constants import (
    STRESS_MOODS,
    STRESS_WINDOW_DAYS,
    STRESS_HIGH_RATIO,
    STRESS_MEDIUM_RATIO,
    CYCLE_VARIATION_THRESHOLD_DAYS,
    CYCLE_MAX_NORMAL_LENGTH_DAYS,
    CYCLE_MIN_STARTS_FOR_VARIANCE,
    IRREGULAR_SELF_REPORTS,
    FATIGUE_SYMPTOMS,
    ENERGY_LEVEL_FATIGUE_WEIGHTS,
    LOW_CAPACITY_INDICATORS,
    JOURNAL_WINDOW_DAYS,
    JOURNAL_MIN_ENTRIES,
    JOURNAL_NEGATIVE_RATIO,
    POSITIVE_MOODS,
    NEGATIVE_MOODS
)

logger = Logger()

T = TypeVar("T")


def _as_utc_naive(value: datetime) -> datetime:
    """Normalize aware timestamps to naive UTC so they compare with naive ones."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def filter_recent_entries(
    entries: Sequence[T],
    window_days: int,
    as_of: Optional[datetime] = None
) -> List[T]:
    """
    Keep entries logged within the trailing window.

    The window ends at as_of or, when not given, at the newest timestamp in
    the entries themselves so the result depends only on the input.
    Entries without a timestamp are treated as recent.

    Args:
        entries: Mood or journal entries with an optional created_at
        window_days: Length of the trailing window in days
        as_of: Optional end of the window

    Returns:
        Entries inside the window, in input order
    """
    stamped = [_as_utc_naive(e.created_at) for e in entries if e.created_at is not None]
    if as_of is not None:
        window_end = _as_utc_naive(as_of)
    elif stamped:
        window_end = max(stamped)
    else:
        return list(entries)

    window_start = window_end - timedelta(days=window_days)
    return [
        e for e in entries
        if e.created_at is None
        or window_start <= _as_utc_naive(e.created_at) <= window_end
    ]


def self_reported_stress(mood_data: Optional[MoodSnapshot]) -> Optional[StressLevel]:
    """Stress from the snapshot summary: an explicit level first, then the average mood."""
    if mood_data is None:
        return None
    level = (mood_data.stress_level or "").strip().lower()
    if level in {s.value for s in StressLevel}:
        return StressLevel(level)
    mood = (mood_data.average_mood or "").strip().lower()
    if mood in STRESS_MOODS:
        return StressLevel.HIGH
    if mood in POSITIVE_MOODS:
        return StressLevel.LOW
    return None


def analyze_mood_data(
    mood_data: Optional[MoodSnapshot],
    as_of: Optional[datetime] = None
) -> StressLevel:
    """
    Derive stress level from the share of stress-adjacent moods.

    Thresholds over the last STRESS_WINDOW_DAYS days:
    ratio >= 0.5 is high, ratio >= 0.25 is medium, anything lower is low.
    Entries without a mood are skipped.

    Args:
        mood_data: Recent mood logs
        as_of: Optional end of the analysis window

    Returns:
        Stress level; without mood logs in the window the self-reported
        summary decides, falling back to medium
    """
    entries = [e for e in mood_data.entries if e.mood] if mood_data else []
    recent = filter_recent_entries(entries, STRESS_WINDOW_DAYS, as_of)
    if not recent:
        return self_reported_stress(mood_data) or StressLevel.MEDIUM

    stressed = sum(1 for e in recent if e.mood.strip().lower() in STRESS_MOODS)
    ratio = stressed / len(recent)

    if ratio >= STRESS_HIGH_RATIO:
        return StressLevel.HIGH
    if ratio >= STRESS_MEDIUM_RATIO:
        return StressLevel.MEDIUM
    return StressLevel.LOW


def analyze_cycle_data(cycle_data: Optional[CycleSnapshot]) -> CycleRegularity:
    """
    Derive cycle regularity from the spread of cycle lengths.

    With three or more recorded starts the cycle is irregular when the
    standard deviation of cycle lengths exceeds 7 days or any cycle runs
    longer than 35 days. With fewer starts only an overlong cycle or the
    self-report (a regularity descriptor or the irregular flag) can mark it
    irregular.

    Args:
        cycle_data: Recorded cycles and optional self-reported regularity

    Returns:
        Cycle regularity, regular when nothing indicates otherwise
    """
    if cycle_data is None:
        return CycleRegularity.REGULAR

    starts = cycle_data.start_dates
    intervals = [(starts[i] - starts[i - 1]).days for i in range(1, len(starts))]

    if any(interval > CYCLE_MAX_NORMAL_LENGTH_DAYS for interval in intervals):
        return CycleRegularity.IRREGULAR

    if len(starts) >= CYCLE_MIN_STARTS_FOR_VARIANCE:
        if stdev(intervals) > CYCLE_VARIATION_THRESHOLD_DAYS:
            return CycleRegularity.IRREGULAR
        return CycleRegularity.REGULAR

    regularity = (cycle_data.regularity or "").strip().lower()
    if cycle_data.irregular or regularity in IRREGULAR_SELF_REPORTS:
        return CycleRegularity.IRREGULAR
    return CycleRegularity.REGULAR


def analyze_exercise_capacity(
    profile: Optional[UserProfile],
    symptoms: Optional[Iterable[str]]
) -> ExerciseCapacity:
    """
    Derive exercise capacity from fatigue indicators.

    Each distinct fatigue-related symptom counts as one indicator; a low
    self-reported energy level adds one and very low adds two. Two or more
    indicators mean low capacity, none with high reported energy means high.

    Args:
        profile: User profile carrying the self-reported energy level
        symptoms: Recent symptom tags

    Returns:
        Exercise capacity, medium by default
    """
    energy_level = (profile.energy_level or "").strip().lower() if profile else ""
    indicators = sum(1 for s in recognized_symptoms(symptoms) if s in FATIGUE_SYMPTOMS)
    indicators += ENERGY_LEVEL_FATIGUE_WEIGHTS.get(energy_level, 0)

    if indicators >= LOW_CAPACITY_INDICATORS:
        return ExerciseCapacity.LOW
    if indicators == 0 and energy_level == "high":
        return ExerciseCapacity.HIGH
    return ExerciseCapacity.MEDIUM


def journal_entry_sentiment(entry: JournalEntry) -> Sentiment:
    """Use the entry's mood tag when it is decisive, otherwise its text."""
    mood = (entry.mood or "").strip().lower()
    if mood in POSITIVE_MOODS:
        return Sentiment.POSITIVE
    if mood in NEGATIVE_MOODS:
        return Sentiment.NEGATIVE
    return analyze_sentiment(entry.content)


def analyze_journal_entries(
    journal_entries: Optional[Sequence[JournalEntry]],
    as_of: Optional[datetime] = None
) -> MentalHealthStatus:
    """
    Derive mental-health status from journal sentiment.

    Status is concerning when at least two entries fall in the last
    JOURNAL_WINDOW_DAYS days and more than half of them are negative.

    Args:
        journal_entries: Recent journal entries
        as_of: Optional end of the analysis window

    Returns:
        Mental-health status, stable by default
    """
    recent = filter_recent_entries(journal_entries or [], JOURNAL_WINDOW_DAYS, as_of)
    if len(recent) < JOURNAL_MIN_ENTRIES:
        return MentalHealthStatus.STABLE

    negative = sum(1 for e in recent if journal_entry_sentiment(e) == Sentiment.NEGATIVE)
    if negative / len(recent) > JOURNAL_NEGATIVE_RATIO:
        return MentalHealthStatus.CONCERNING
    return MentalHealthStatus.STABLE


def analyze(
    profile: Optional[UserProfile],
    symptoms: Optional[Iterable[str]],
    cycle_data: Optional[CycleSnapshot],
    mood_data: Optional[MoodSnapshot],
    journal_entries: Optional[Sequence[JournalEntry]],
    as_of: Optional[datetime] = None
) -> AnalysisResult:
    """
    Compute the full analysis used by the recommendation rules.

    Args:
        profile: Self-reported profile
        symptoms: Recent symptom tags
        cycle_data: Cycle history snapshot
        mood_data: Mood log snapshot
        journal_entries: Recent journal entries
        as_of: Optional end of the mood and journal windows

    Returns:
        Freshly built AnalysisResult
    """
    symptoms = list(symptoms or [])
    result = AnalysisResult(
        pcos_type=classify(symptoms),
        stress_level=analyze_mood_data(mood_data, as_of),
        cycle_regularity=analyze_cycle_data(cycle_data),
        exercise_capacity=analyze_exercise_capacity(profile, symptoms),
        mental_health_status=analyze_journal_entries(journal_entries, as_of)
    )
    logger.info("User state analyzed", extra=result.model_dump(mode="json"))
    return result
