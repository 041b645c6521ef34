"""
Lambda handlers package for AWS Lambda functions.
"""
from .recommendations import handler as recommendations_handler
from .symptom_analyzer import handler as symptom_analyzer_handler
from .sentiment import handler as sentiment_handler
from .chat import handler as chat_handler

__all__ = [
    "recommendations_handler",
    "symptom_analyzer_handler",
    "sentiment_handler",
    "chat_handler"
]
