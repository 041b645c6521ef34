"""
Rule-based support chat responder.

Rules are checked in order and the first with a keyword contained in the
lowercased message decides the reply; messages matching none get a neutral prompt.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from datetime import datetime, timezone

from src.models.chat import ChatResponse, Sentiment

DEFAULT_RESPONSE = "I understand you're reaching out. How can I support you today?"


@dataclass
class ChatRule:
    """Keyword rule producing a canned supportive reply."""
    keywords: List[str]
    response: str
    sentiment: Sentiment = Sentiment.NEUTRAL
    suggestions: List[str] = field(default_factory=list)

    def matches(self, message: str) -> bool:
        text = (message or "").lower()
        return any(keyword in text for keyword in self.keywords)


CHAT_RULES: List[ChatRule] = [
    ChatRule(
        keywords=["pcos", "symptom"],
        response=(
            "I'm here to help you understand your PCOS journey. Would you like to "
            "track your symptoms or learn about management strategies?"
        ),
        suggestions=[
            "Track my symptoms",
            "Learn about PCOS types",
            "Get lifestyle tips",
            "Connect with community"
        ]
    ),
    ChatRule(
        keywords=["sad", "depressed", "overwhelmed"],
        response=(
            "I hear that you're going through a difficult time. Your feelings are "
            "valid, and you're not alone in this journey. Would you like to try "
            "some journaling or breathing exercises?"
        ),
        sentiment=Sentiment.NEGATIVE,
        suggestions=[
            "Start journaling",
            "Try breathing exercises",
            "Connect with support",
            "Learn coping strategies"
        ]
    ),
    ChatRule(
        keywords=["good", "better", "happy"],
        response=(
            "I'm so glad to hear you're feeling positive! It's wonderful to "
            "celebrate these moments. How can we build on this positive energy?"
        ),
        sentiment=Sentiment.POSITIVE,
        suggestions=[
            "Track this mood",
            "Share with community",
            "Set new goals",
            "Plan self-care"
        ]
    ),
    ChatRule(
        keywords=["period", "cycle", "menstrual"],
        response=(
            "Tracking your cycle is so important for understanding your body's "
            "patterns. Would you like help logging your cycle data or understanding "
            "your patterns?"
        ),
        suggestions=[
            "Log cycle data",
            "View cycle insights",
            "Learn about phases",
            "Track symptoms"
        ]
    ),
]


def match_rule(message: str) -> Optional[ChatRule]:
    """Return the first rule matching the message, if any."""
    for rule in CHAT_RULES:
        if rule.matches(message):
            return rule
    return None


def generate_chat_response(message: str) -> ChatResponse:
    """
    Build a supportive reply for a user message.

    Args:
        message: Text typed by the user

    Returns:
        ChatResponse with reply text, sentiment and follow-up suggestions
    """
    rule = match_rule(message)
    if rule is None:
        return ChatResponse(
            response=DEFAULT_RESPONSE,
            timestamp=datetime.now(timezone.utc)
        )
    return ChatResponse(
        response=rule.response,
        sentiment=rule.sentiment,
        suggestions=list(rule.suggestions),
        timestamp=datetime.now(timezone.utc)
    )
