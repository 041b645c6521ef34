"""
Tests for user-state analysis.
"""
from datetime import date, datetime, timedelta

from src.models.analysis import (
    AnalysisResult,
    CycleRegularity,
    ExerciseCapacity,
    MentalHealthStatus,
    StressLevel
)
from src.models.pcos import PCOSCategory
from src.models.signals import (
    CycleRecord,
    CycleSnapshot,
    JournalEntry,
    MoodEntry,
    MoodSnapshot,
    UserProfile
)
from src.services.analyzer import (
    analyze,
    analyze_cycle_data,
    analyze_exercise_capacity,
    analyze_journal_entries,
    analyze_mood_data,
    filter_recent_entries
)

def test_analyze_with_no_signals_returns_defaults():
    """Test missing inputs degrade to the safe defaults."""
    result = analyze(None, None, None, None, None)
    
    assert result == AnalysisResult()
    assert result.pcos_type == PCOSCategory.INSULIN_RESISTANT
    assert result.stress_level == StressLevel.MEDIUM
    assert result.cycle_regularity == CycleRegularity.REGULAR
    assert result.exercise_capacity == ExerciseCapacity.MEDIUM
    assert result.mental_health_status == MentalHealthStatus.STABLE

def test_analyze_combines_all_signals(
    low_energy_profile,
    irregular_cycle_data,
    stressed_mood_data,
    negative_journal_entries
):
    """Test each descriptor is derived from its own signal."""
    result = analyze(
        low_energy_profile,
        ["fatigue", "sleep-issues", "mood-changes"],
        irregular_cycle_data,
        stressed_mood_data,
        negative_journal_entries
    )
    
    assert result.pcos_type == PCOSCategory.ADRENAL
    assert result.stress_level == StressLevel.HIGH
    assert result.cycle_regularity == CycleRegularity.IRREGULAR
    assert result.exercise_capacity == ExerciseCapacity.LOW
    assert result.mental_health_status == MentalHealthStatus.CONCERNING

def test_mood_without_entries_is_medium():
    """Test empty mood data gives medium stress."""
    assert analyze_mood_data(None) == StressLevel.MEDIUM
    assert analyze_mood_data(MoodSnapshot()) == StressLevel.MEDIUM

def test_mood_stress_thresholds(mood_snapshot):
    """Test stress ratio thresholds."""
    assert analyze_mood_data(mood_snapshot(["anxious", "frustrated", "calm", "happy"])) == StressLevel.HIGH
    assert analyze_mood_data(mood_snapshot(["anxious", "calm", "happy", "hopeful"])) == StressLevel.MEDIUM
    assert analyze_mood_data(mood_snapshot(["calm", "happy", "hopeful", "grateful"])) == StressLevel.LOW

def test_mood_window_ignores_old_entries(mood_snapshot):
    """Test only moods within the trailing window count."""
    moods = ["anxious", "frustrated"] + ["calm"] * 27 + ["happy", "calm"]
    mood_data = mood_snapshot(moods)
    
    assert analyze_mood_data(mood_data) == StressLevel.LOW

def test_mood_window_with_explicit_end(mood_snapshot):
    """Test a window ending long after the last entry has no data."""
    mood_data = mood_snapshot(["anxious", "anxious"])
    
    assert analyze_mood_data(mood_data, as_of=datetime(2024, 6, 1)) == StressLevel.MEDIUM

def test_mood_handles_mixed_timezones():
    """Test aware and naive timestamps can be compared."""
    mood_data = MoodSnapshot.model_validate({"entries": [
        {"mood": "anxious", "createdAt": "2024-03-01T10:00:00Z"},
        {"mood": "anxious", "createdAt": "2024-03-02T10:00:00"}
    ]})
    
    assert analyze_mood_data(mood_data) == StressLevel.HIGH

def test_entries_without_timestamp_count_as_recent():
    """Test undated entries are kept in the window."""
    entries = [
        MoodEntry(mood="anxious"),
        MoodEntry(mood="calm", created_at=datetime(2024, 1, 1))
    ]
    
    assert filter_recent_entries(entries, 14, as_of=datetime(2024, 6, 1)) == [entries[0]]

def test_cycle_without_data_is_regular():
    """Test missing cycle data defaults to regular."""
    assert analyze_cycle_data(None) == CycleRegularity.REGULAR
    assert analyze_cycle_data(CycleSnapshot()) == CycleRegularity.REGULAR

def test_cycle_regular_lengths(regular_cycle_data):
    """Test constant cycle length is regular."""
    assert analyze_cycle_data(regular_cycle_data) == CycleRegularity.REGULAR

def test_cycle_small_variation_is_regular():
    """Test cycles of 24, 31 and 26 days stay under the variation threshold."""
    cycle_data = CycleSnapshot(cycles=[
        CycleRecord(start_date=date(2024, 1, 1)),
        CycleRecord(start_date=date(2024, 1, 25)),
        CycleRecord(start_date=date(2024, 2, 25)),
        CycleRecord(start_date=date(2024, 3, 22))
    ])
    
    assert analyze_cycle_data(cycle_data) == CycleRegularity.REGULAR

def test_cycle_large_variation_is_irregular(irregular_cycle_data):
    """Test cycle length deviation above 7 days is irregular."""
    assert analyze_cycle_data(irregular_cycle_data) == CycleRegularity.IRREGULAR

def test_cycle_longer_than_35_days_is_irregular():
    """Test a single overlong cycle is irregular even with little data."""
    cycle_data = CycleSnapshot(cycles=[
        CycleRecord(start_date=date(2024, 1, 1)),
        CycleRecord(start_date=date(2024, 2, 10))
    ])
    
    assert analyze_cycle_data(cycle_data) == CycleRegularity.IRREGULAR

def test_cycle_self_report_used_without_enough_history():
    """Test the self-reported regularity decides when history is short."""
    assert analyze_cycle_data(CycleSnapshot(regularity="very-irregular")) == CycleRegularity.IRREGULAR
    assert analyze_cycle_data(CycleSnapshot(regularity="absent")) == CycleRegularity.IRREGULAR
    assert analyze_cycle_data(CycleSnapshot(regularity="regular")) == CycleRegularity.REGULAR

def test_cycle_history_overrides_self_report(regular_cycle_data):
    """Test recorded cycles take precedence over the self-report."""
    cycle_data = CycleSnapshot(cycles=regular_cycle_data.cycles, regularity="irregular")
    
    assert analyze_cycle_data(cycle_data) == CycleRegularity.REGULAR

def test_cycle_snapshot_from_client_payload():
    """Test camelCase cycle payloads are accepted."""
    cycle_data = CycleSnapshot.model_validate({
        "cycles": [
            {"startDate": "2024-01-01", "endDate": "2024-01-05"},
            {"startDate": "2024-01-01"},
            {"startDate": "2024-02-15"}
        ]
    })
    
    assert cycle_data.start_dates == [date(2024, 1, 1), date(2024, 2, 15)]
    assert analyze_cycle_data(cycle_data) == CycleRegularity.IRREGULAR

def test_exercise_capacity_defaults_to_medium():
    """Test no indicators give medium capacity."""
    assert analyze_exercise_capacity(None, None) == ExerciseCapacity.MEDIUM
    assert analyze_exercise_capacity(UserProfile(), ["acne"]) == ExerciseCapacity.MEDIUM

def test_exercise_capacity_low_with_multiple_indicators(low_energy_profile):
    """Test two fatigue indicators give low capacity."""
    assert analyze_exercise_capacity(None, ["fatigue", "brain-fog"]) == ExerciseCapacity.LOW
    assert analyze_exercise_capacity(low_energy_profile, ["fatigue"]) == ExerciseCapacity.LOW
    assert analyze_exercise_capacity(UserProfile(energy_level="very-low"), []) == ExerciseCapacity.LOW

def test_exercise_capacity_single_indicator_is_medium():
    """Test one indicator, even repeated, is not enough for low capacity."""
    assert analyze_exercise_capacity(None, ["fatigue", "fatigue"]) == ExerciseCapacity.MEDIUM

def test_exercise_capacity_high_energy():
    """Test high energy without fatigue gives high capacity."""
    high_energy = UserProfile(energy_level="high")
    
    assert analyze_exercise_capacity(high_energy, ["acne"]) == ExerciseCapacity.HIGH
    assert analyze_exercise_capacity(high_energy, ["fatigue"]) == ExerciseCapacity.MEDIUM

def test_journal_without_entries_is_stable():
    """Test missing journal data is stable."""
    assert analyze_journal_entries(None) == MentalHealthStatus.STABLE
    assert analyze_journal_entries([]) == MentalHealthStatus.STABLE

def test_journal_single_negative_entry_is_stable():
    """Test one entry is not enough to flag concern."""
    entries = [JournalEntry(content="Feeling hopeless", mood="sad")]
    
    assert analyze_journal_entries(entries) == MentalHealthStatus.STABLE

def test_journal_negative_majority_is_concerning(negative_journal_entries):
    """Test more than half negative entries is concerning."""
    assert analyze_journal_entries(negative_journal_entries) == MentalHealthStatus.CONCERNING

def test_journal_even_split_is_stable():
    """Test exactly half negative entries is not a majority."""
    entries = [
        JournalEntry(content="", mood="sad"),
        JournalEntry(content="", mood="happy")
    ]
    
    assert analyze_journal_entries(entries) == MentalHealthStatus.STABLE

def test_journal_uses_text_when_mood_missing():
    """Test content sentiment decides entries without a mood tag."""
    entries = [
        JournalEntry(content="I feel overwhelmed and exhausted"),
        JournalEntry(content="So tired and sad today", mood="unsure"),
        JournalEntry(content="Had a good day")
    ]
    
    assert analyze_journal_entries(entries) == MentalHealthStatus.CONCERNING

def test_journal_window_ignores_old_entries():
    """Test old negative entries outside the window are ignored."""
    now = datetime(2024, 5, 1, 20, 0)
    entries = [
        JournalEntry(content="", mood="sad", created_at=now - timedelta(days=40)),
        JournalEntry(content="", mood="anxious", created_at=now - timedelta(days=35)),
        JournalEntry(content="", mood="calm", created_at=now - timedelta(days=1)),
        JournalEntry(content="", mood="happy", created_at=now)
    ]
    
    assert analyze_journal_entries(entries) == MentalHealthStatus.STABLE

def test_mood_summary_used_without_entries():
    """Test the reported stress level or average mood decides when nothing is logged."""
    assert analyze_mood_data(MoodSnapshot(stress_level="high")) == StressLevel.HIGH
    assert analyze_mood_data(MoodSnapshot(stress_level="Low")) == StressLevel.LOW
    assert analyze_mood_data(MoodSnapshot(average_mood="anxious")) == StressLevel.HIGH
    assert analyze_mood_data(MoodSnapshot(average_mood="calm")) == StressLevel.LOW
    assert analyze_mood_data(MoodSnapshot(average_mood="meh", stress_level="extreme")) == StressLevel.MEDIUM

def test_mood_summary_from_client_payload():
    """Test camelCase summary keys are read."""
    mood_data = MoodSnapshot.model_validate({"averageMood": "anxious", "stressLevel": "high"})
    
    assert analyze_mood_data(mood_data) == StressLevel.HIGH

def test_logged_moods_take_precedence_over_summary(mood_snapshot):
    """Test dated entries outrank the self-reported summary."""
    mood_data = mood_snapshot(["calm", "happy", "calm", "hopeful"])
    mood_data = MoodSnapshot(entries=mood_data.entries, stress_level="high")
    
    assert analyze_mood_data(mood_data) == StressLevel.LOW

def test_mood_entries_without_mood_are_skipped():
    """Test entries with no mood neither count nor block analysis."""
    mood_data = MoodSnapshot(entries=[
        MoodEntry(mood=None, created_at=datetime(2024, 3, 1)),
        MoodEntry(mood="anxious", created_at=datetime(2024, 3, 2)),
        MoodEntry(mood="calm", created_at=datetime(2024, 3, 3))
    ])
    
    assert analyze_mood_data(mood_data) == StressLevel.HIGH
    assert analyze_mood_data(MoodSnapshot(entries=[MoodEntry()])) == StressLevel.MEDIUM

def test_cycle_irregular_flag():
    """Test the boolean irregular flag counts as a self-report."""
    assert analyze_cycle_data(CycleSnapshot(irregular=True)) == CycleRegularity.IRREGULAR
    assert analyze_cycle_data(CycleSnapshot(irregular=False)) == CycleRegularity.REGULAR
    
    cycle_data = CycleSnapshot.model_validate({"irregular": True, "lastPeriod": "2024-01-15"})
    assert cycle_data.last_period == date(2024, 1, 15)
    assert analyze_cycle_data(cycle_data) == CycleRegularity.IRREGULAR

def test_cycle_unknown_self_report_is_regular():
    """Test unrecognized regularity descriptors are ignored."""
    assert analyze_cycle_data(CycleSnapshot(regularity="sometimes")) == CycleRegularity.REGULAR
    assert analyze_cycle_data(CycleSnapshot(regularity="Irregular")) == CycleRegularity.IRREGULAR

def test_exercise_capacity_unknown_energy_level():
    """Test energy levels outside the vocabulary add no indicators."""
    assert analyze_exercise_capacity(UserProfile(energy_level="medium"), []) == ExerciseCapacity.MEDIUM
    assert analyze_exercise_capacity(UserProfile(energy_level="Very-Low"), []) == ExerciseCapacity.LOW

def test_journal_entry_without_content():
    """Test null journal text falls back to the mood tag or neutral."""
    entries = [
        JournalEntry(content=None, mood="sad"),
        JournalEntry(content=None, mood="anxious"),
        JournalEntry(content=None)
    ]
    
    assert analyze_journal_entries(entries) == MentalHealthStatus.CONCERNING
