"""
Recommendation models for PCOS lifestyle suggestions.
"""
from enum import Enum
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class RecommendationCategory(str, Enum):
    NUTRITION = "nutrition"
    EXERCISE = "exercise"
    LIFESTYLE = "lifestyle"
    MENTAL_HEALTH = "mental-health"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    """
    A single actionable suggestion emitted by a recommendation rule.

    The id is fixed per rule so identical inputs give identical output.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: RecommendationCategory
    confidence: int = Field(..., ge=0, le=100)
    priority: Priority
    actionable: bool = True
    resources: Optional[List[str]] = None


class RecommendationResponse(BaseModel):
    """
    Body returned by the recommendations endpoint.
    """
    recommendations: List[Recommendation]
    generated_at: datetime
    user_id: str
