"""
Models for the rule-based support chat and sentiment endpoints.
"""
from enum import Enum
from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    context: Optional[Any] = None


class ChatResponse(BaseModel):
    response: str
    sentiment: Sentiment = Sentiment.NEUTRAL
    suggestions: List[str] = Field(default_factory=list)
    timestamp: datetime


class SentimentRequest(BaseModel):
    content: str


class SentimentResult(BaseModel):
    sentiment: Sentiment
    score: int
    generated_at: datetime
