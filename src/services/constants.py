"""
Constants and shared data for PCOS classification and recommendation services.
"""
from typing import Dict, FrozenSet, List
from src.models.pcos import PCOSCategory, PCOSTypeProfile, Symptom
from src.models.recommendation import Priority, Recommendation, RecommendationCategory

# Tie-break order when several categories share the highest tally
PCOS_CATEGORY_PRIORITY: List[PCOSCategory] = [
    PCOSCategory.INSULIN_RESISTANT,
    PCOSCategory.INFLAMMATORY,
    PCOSCategory.ADRENAL,
    PCOSCategory.POST_PILL,
]

SYMPTOM_CATEGORY_MAP: Dict[str, List[PCOSCategory]] = {
    "weight-gain": [PCOSCategory.INSULIN_RESISTANT],
    "sugar-cravings": [PCOSCategory.INSULIN_RESISTANT],
    "fatigue": [PCOSCategory.INSULIN_RESISTANT, PCOSCategory.ADRENAL],
    "acne": [PCOSCategory.INFLAMMATORY, PCOSCategory.INSULIN_RESISTANT],
    "hair-growth": [PCOSCategory.INSULIN_RESISTANT],
    "hair-loss": [PCOSCategory.INSULIN_RESISTANT],
    "mood-changes": [PCOSCategory.ADRENAL, PCOSCategory.INFLAMMATORY],
    "sleep-issues": [PCOSCategory.ADRENAL],
    "brain-fog": [PCOSCategory.INSULIN_RESISTANT, PCOSCategory.INFLAMMATORY],
    "irregular-periods": [PCOSCategory.INSULIN_RESISTANT, PCOSCategory.ADRENAL],
}

SYMPTOMS: List[Symptom] = [
    Symptom(
        id="irregular-periods",
        name="Irregular Periods",
        description="Cycles longer than 35 days or fewer than 8 cycles per year",
        category="cycle",
    ),
    Symptom(
        id="acne",
        name="Acne",
        description="Persistent acne, especially on the jawline, chin, or upper neck",
        category="physical",
    ),
    Symptom(
        id="hair-growth",
        name="Excess Hair Growth",
        description="Unwanted hair growth on face, chest, back, or other areas",
        category="physical",
    ),
    Symptom(
        id="hair-loss",
        name="Hair Thinning/Loss",
        description="Hair thinning or loss, particularly on the scalp",
        category="physical",
    ),
    Symptom(
        id="weight-gain",
        name="Weight Gain",
        description="Unexplained weight gain or difficulty losing weight",
        category="physical",
    ),
    Symptom(
        id="fatigue",
        name="Fatigue",
        description="Persistent tiredness or lack of energy",
        category="physical",
    ),
    Symptom(
        id="mood-changes",
        name="Mood Changes",
        description="Mood swings, anxiety, or depression",
        category="mental",
    ),
    Symptom(
        id="sleep-issues",
        name="Sleep Issues",
        description="Difficulty falling asleep or staying asleep",
        category="mental",
    ),
    Symptom(
        id="sugar-cravings",
        name="Sugar Cravings",
        description="Strong cravings for sugary foods",
        category="physical",
    ),
    Symptom(
        id="brain-fog",
        name="Brain Fog",
        description="Difficulty concentrating or remembering things",
        category="mental",
    ),
]

PCOS_TYPE_PROFILES: Dict[PCOSCategory, PCOSTypeProfile] = {
    PCOSCategory.INSULIN_RESISTANT: PCOSTypeProfile(
        id=PCOSCategory.INSULIN_RESISTANT,
        name="Insulin Resistant PCOS",
        description=(
            "The most common type, characterized by high insulin levels that lead "
            "to increased androgen production."
        ),
        common_symptoms=["Weight gain", "Sugar cravings", "Fatigue", "Acne", "Irregular periods"],
        recommendations=[
            "Low-glycemic diet",
            "Regular exercise",
            "Intermittent fasting",
            "Stress management",
            "Inositol supplements",
        ],
    ),
    PCOSCategory.INFLAMMATORY: PCOSTypeProfile(
        id=PCOSCategory.INFLAMMATORY,
        name="Inflammatory PCOS",
        description="Triggered by chronic inflammation in the body that disrupts hormone function.",
        common_symptoms=["Joint pain", "Skin issues", "Digestive problems", "Headaches", "Fatigue"],
        recommendations=[
            "Anti-inflammatory diet",
            "Omega-3 supplements",
            "Turmeric",
            "Stress reduction",
            "Adequate sleep",
        ],
    ),
    PCOSCategory.ADRENAL: PCOSTypeProfile(
        id=PCOSCategory.ADRENAL,
        name="Adrenal PCOS",
        description="Related to stress response and adrenal gland function rather than insulin resistance.",
        common_symptoms=["Stress sensitivity", "Fatigue", "Sleep issues", "Anxiety", "Normal insulin levels"],
        recommendations=[
            "Stress management",
            "Adaptogenic herbs",
            "Regular sleep schedule",
            "Mindfulness",
            "Vitamin B5",
        ],
    ),
    PCOSCategory.POST_PILL: PCOSTypeProfile(
        id=PCOSCategory.POST_PILL,
        name="Post-Pill PCOS",
        description="Occurs after stopping hormonal birth control, often temporary as hormones readjust.",
        common_symptoms=[
            "Recent birth control discontinuation",
            "Sudden onset of symptoms",
            "Irregular periods",
            "Acne",
            "Hair issues",
        ],
        recommendations=[
            "Patience",
            "Liver support",
            "Zinc",
            "Vitamin B complex",
            "Regular cycle tracking",
        ],
    ),
}

# Stress analysis: moods logged within the trailing window
STRESS_MOODS: FrozenSet[str] = frozenset({
    "anxious", "frustrated", "stressed", "overwhelmed", "irritable", "angry"
})
STRESS_WINDOW_DAYS = 14
STRESS_HIGH_RATIO = 0.5
STRESS_MEDIUM_RATIO = 0.25

# Cycle regularity: standard deviation of days between cycle starts
CYCLE_VARIATION_THRESHOLD_DAYS = 7
CYCLE_MAX_NORMAL_LENGTH_DAYS = 35
CYCLE_MIN_STARTS_FOR_VARIANCE = 3
IRREGULAR_SELF_REPORTS: FrozenSet[str] = frozenset({"irregular", "very-irregular", "absent"})

# Exercise capacity: fatigue indicators among symptoms and reported energy
FATIGUE_SYMPTOMS: FrozenSet[str] = frozenset({"fatigue", "brain-fog", "sleep-issues"})
ENERGY_LEVEL_FATIGUE_WEIGHTS: Dict[str, int] = {
    "high": 0,
    "normal": 0,
    "low": 1,
    "very-low": 2,
}
LOW_CAPACITY_INDICATORS = 2

# Mental health: share of negative journal entries within the trailing window
JOURNAL_WINDOW_DAYS = 14
JOURNAL_MIN_ENTRIES = 2
JOURNAL_NEGATIVE_RATIO = 0.5
POSITIVE_MOODS: FrozenSet[str] = frozenset({"happy", "calm", "hopeful", "grateful"})
NEGATIVE_MOODS: FrozenSet[str] = frozenset({"anxious", "sad", "frustrated", "tired"})

# Keyword sentiment lexicon
POSITIVE_KEYWORDS: FrozenSet[str] = frozenset({
    "good", "better", "happy", "grateful", "hopeful", "calm", "great",
    "proud", "relieved", "energized", "excited", "love", "peaceful",
})
NEGATIVE_KEYWORDS: FrozenSet[str] = frozenset({
    "sad", "depressed", "overwhelmed", "anxious", "worried", "tired",
    "exhausted", "hopeless", "lonely", "angry", "frustrated", "awful",
    "stressed", "crying", "worse",
})

PRIORITY_WEIGHTS: Dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}
MAX_RECOMMENDATIONS = 8

RECOMMENDATION_TEMPLATES: Dict[str, Recommendation] = {
    "nutrition-low-gi": Recommendation(
        id="nutrition-low-gi",
        title="Low Glycemic Index Foods",
        description=(
            "Choose foods that help stabilize blood sugar levels, such as quinoa, "
            "sweet potatoes, and leafy greens."
        ),
        category=RecommendationCategory.NUTRITION,
        confidence=85,
        priority=Priority.HIGH,
        resources=["Low GI food list", "Meal planning guide", "Blood sugar tracking tips"],
    ),
    "nutrition-omega3": Recommendation(
        id="nutrition-omega3",
        title="Increase Omega-3",
        description=(
            "Add fatty fish, walnuts, and flax seeds to help reduce inflammation "
            "and improve insulin sensitivity."
        ),
        category=RecommendationCategory.NUTRITION,
        confidence=78,
        priority=Priority.MEDIUM,
    ),
    "nutrition-anti-inflammatory": Recommendation(
        id="nutrition-anti-inflammatory",
        title="Anti-Inflammatory Diet",
        description=(
            "Focus on foods rich in antioxidants like berries, turmeric, and green tea "
            "to reduce inflammation."
        ),
        category=RecommendationCategory.NUTRITION,
        confidence=82,
        priority=Priority.HIGH,
    ),
    "exercise-gentle-start": Recommendation(
        id="exercise-gentle-start",
        title="Start with Gentle Movement",
        description="Begin with 10-15 minutes of walking or gentle yoga to build your fitness foundation.",
        category=RecommendationCategory.EXERCISE,
        confidence=90,
        priority=Priority.HIGH,
        resources=["Beginner yoga videos", "Walking schedule template", "Low-impact exercise guide"],
    ),
    "exercise-strength-training": Recommendation(
        id="exercise-strength-training",
        title="Add Strength Training",
        description=(
            "Include 2-3 strength training sessions per week to improve insulin "
            "sensitivity and metabolism."
        ),
        category=RecommendationCategory.EXERCISE,
        confidence=85,
        priority=Priority.MEDIUM,
    ),
    "lifestyle-stress-management": Recommendation(
        id="lifestyle-stress-management",
        title="Stress Management Techniques",
        description=(
            "Try meditation, deep breathing, or progressive muscle relaxation "
            "for 10 minutes daily."
        ),
        category=RecommendationCategory.LIFESTYLE,
        confidence=88,
        priority=Priority.HIGH,
        resources=["Guided meditation apps", "Breathing exercise videos", "Stress management workbook"],
    ),
    "lifestyle-sleep-hygiene": Recommendation(
        id="lifestyle-sleep-hygiene",
        title="Improve Sleep Hygiene",
        description=(
            "Maintain a consistent sleep schedule and create a relaxing bedtime "
            "routine to support hormone balance."
        ),
        category=RecommendationCategory.LIFESTYLE,
        confidence=80,
        priority=Priority.MEDIUM,
    ),
    "mental-health-journaling": Recommendation(
        id="mental-health-journaling",
        title="Continue Journaling",
        description=(
            "Keep expressing your thoughts and feelings through journaling to "
            "process emotions and track patterns."
        ),
        category=RecommendationCategory.MENTAL_HEALTH,
        confidence=75,
        priority=Priority.MEDIUM,
        resources=["Journaling prompts", "Mood tracking templates", "Self-reflection exercises"],
    ),
    "mental-health-support": Recommendation(
        id="mental-health-support",
        title="Consider Professional Support",
        description=(
            "Connect with a therapist who specializes in chronic health conditions "
            "for additional support."
        ),
        category=RecommendationCategory.MENTAL_HEALTH,
        confidence=70,
        priority=Priority.HIGH,
    ),
}
