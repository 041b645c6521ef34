"""
Service module for generating and ranking personalized PCOS recommendations.

Four independent rule sets (nutrition, exercise, lifestyle, mental health)
each map an AnalysisResult to zero or more recommendations. Their output is
merged, ordered by priority tier then confidence, and bounded in size.

Typical usage:
    >>> analysis = AnalysisResult(exercise_capacity="low")
    >>> [rec.id for rec in generate_recommendations(analysis)][:2]
    ['exercise-gentle-start', 'nutrition-low-gi']
"""
from typing import Callable, List, Optional
from datetime import datetime, timezone

from aws_lambda_powertools import Logger

from src.models.analysis import (
    AnalysisResult,
    CycleRegularity,
    ExerciseCapacity,
    MentalHealthStatus,
    StressLevel
)
from src.models.pcos import PCOSCategory
from src.models.recommendation import Recommendation, RecommendationResponse
from src.models.signals import RecommendationRequest
from src.services.analyzer import analyze
from src.services.constants import (
    MAX_RECOMMENDATIONS,
    PRIORITY_WEIGHTS,
    RECOMMENDATION_TEMPLATES
)

logger = Logger()


def _emit(rule_id: str) -> Recommendation:
    return RECOMMENDATION_TEMPLATES[rule_id].model_copy(deep=True)


def generate_nutrition_recommendations(analysis: AnalysisResult) -> List[Recommendation]:
    """Nutrition advice keyed on PCOS type; adrenal and post-pill get none."""
    recommendations = []
    if analysis.pcos_type == PCOSCategory.INSULIN_RESISTANT:
        recommendations.append(_emit("nutrition-low-gi"))
        recommendations.append(_emit("nutrition-omega3"))
    if analysis.pcos_type == PCOSCategory.INFLAMMATORY:
        recommendations.append(_emit("nutrition-anti-inflammatory"))
    return recommendations


def generate_exercise_recommendations(analysis: AnalysisResult) -> List[Recommendation]:
    """Exactly one exercise recommendation, chosen by exercise capacity."""
    if analysis.exercise_capacity == ExerciseCapacity.LOW:
        return [_emit("exercise-gentle-start")]
    return [_emit("exercise-strength-training")]


def generate_lifestyle_recommendations(analysis: AnalysisResult) -> List[Recommendation]:
    recommendations = []
    if analysis.stress_level == StressLevel.HIGH:
        recommendations.append(_emit("lifestyle-stress-management"))
    if analysis.cycle_regularity == CycleRegularity.IRREGULAR:
        recommendations.append(_emit("lifestyle-sleep-hygiene"))
    return recommendations


def generate_mental_health_recommendations(analysis: AnalysisResult) -> List[Recommendation]:
    """Support suggestions, only emitted when journal sentiment is concerning."""
    recommendations = []
    if analysis.mental_health_status == MentalHealthStatus.CONCERNING:
        recommendations.append(_emit("mental-health-journaling"))
        recommendations.append(_emit("mental-health-support"))
    return recommendations


RULE_SETS: List[Callable[[AnalysisResult], List[Recommendation]]] = [
    generate_nutrition_recommendations,
    generate_exercise_recommendations,
    generate_lifestyle_recommendations,
    generate_mental_health_recommendations,
]


def priority_weight(recommendation: Recommendation) -> int:
    """Numeric weight of a recommendation's priority tier (high=3, low=1)."""
    return PRIORITY_WEIGHTS[recommendation.priority]


def rank_recommendations(
    recommendations: List[Recommendation],
    limit: int = MAX_RECOMMENDATIONS
) -> List[Recommendation]:
    """
    Order recommendations by priority tier then confidence, both descending.

    The sort is stable so equal keys keep emission order.

    Args:
        recommendations: Merged output of all rule sets
        limit: Maximum number of recommendations to keep

    Returns:
        Ranked and truncated list
    """
    ranked = sorted(
        recommendations,
        key=lambda rec: (-priority_weight(rec), -rec.confidence)
    )
    return ranked[:limit]


def generate_recommendations(analysis: AnalysisResult) -> List[Recommendation]:
    """
    Run every rule set against an analysis and rank the merged result.

    Always contains one exercise recommendation; zero nutrition or
    mental-health recommendations is a valid outcome.

    Args:
        analysis: Descriptors computed by the analyzer

    Returns:
        At most MAX_RECOMMENDATIONS recommendations in deterministic order
    """
    merged = []
    for rule_set in RULE_SETS:
        merged.extend(rule_set(analysis))
    return rank_recommendations(merged)


class RecommendationEngine:
    """Engine for generating personalized recommendations for one user."""

    def __init__(self, user_id: str):
        self.user_id = user_id

    def analyze_request(
        self,
        request: RecommendationRequest,
        as_of: Optional[datetime] = None
    ) -> AnalysisResult:
        """Build the analysis for a parsed recommendations request."""
        return analyze(
            request.user_profile,
            request.recent_symptoms,
            request.cycle_data,
            request.mood_data,
            request.journal_entries,
            as_of=as_of
        )

    def generate_recommendations(
        self,
        request: RecommendationRequest,
        as_of: Optional[datetime] = None
    ) -> RecommendationResponse:
        """
        Generate the ranked recommendations for a request.

        Args:
            request: Parsed request body with the user's signals
            as_of: Optional end of the mood and journal analysis windows

        Returns:
            RecommendationResponse stamped with the generation time
        """
        analysis = self.analyze_request(request, as_of)
        recommendations = generate_recommendations(analysis)

        logger.info("Recommendations generated", extra={
            "user_id": self.user_id,
            "pcos_type": analysis.pcos_type.value,
            "recommendation_ids": [rec.id for rec in recommendations]
        })

        return RecommendationResponse(
            recommendations=recommendations,
            generated_at=datetime.now(timezone.utc),
            user_id=self.user_id
        )
