"""
Persistence of generated insights.

Recommendations are appended for later analytics with a time-to-live after
which DynamoDB expires them; chat exchanges are appended as a log. Nothing
here is read back when generating new insights.

Typical usage:
    store = InsightsStore()
    try:
        store.store_recommendations(user_id, response.recommendations, response.generated_at)
    except UpstreamUnavailableError:
        logger.warning("Recommendations not persisted")
"""
import os
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone, timedelta
from decimal import Decimal

from aws_lambda_powertools import Logger

from src.models.chat import ChatResponse
from src.models.recommendation import Recommendation
from src.services.exceptions import UpstreamUnavailableError
from src.utils.dynamo import (
    get_dynamo,
    create_pk,
    create_recommendation_sk,
    create_conversation_sk
)

logger = Logger()

DEFAULT_TTL_DAYS = 7


class InsightsStore:
    """Service for appending recommendations and chat logs to DynamoDB."""

    def __init__(self, ttl_days: Optional[int] = None):
        """Initialize the store, resolving the DynamoDB client lazily."""
        if ttl_days is None:
            ttl_days = int(os.environ.get("RECOMMENDATION_TTL_DAYS", DEFAULT_TTL_DAYS))
        self.ttl_days = ttl_days
        self._dynamo = None

    @property
    def dynamo(self):
        if self._dynamo is None:
            self._dynamo = get_dynamo()
        return self._dynamo

    def _expiry(self, generated_at: datetime) -> datetime:
        return generated_at + timedelta(days=self.ttl_days)

    def build_recommendation_items(
        self,
        user_id: str,
        recommendations: List[Recommendation],
        generated_at: datetime
    ) -> List[Dict[str, Any]]:
        """
        Convert recommendations into DynamoDB items.

        Args:
            user_id: Authenticated user ID
            recommendations: Ranked recommendations to store
            generated_at: Generation timestamp shared by the batch

        Returns:
            One item per recommendation
        """
        expires_at = self._expiry(generated_at)
        timestamp = generated_at.isoformat()
        return [
            {
                "PK": create_pk(user_id),
                "SK": create_recommendation_sk(timestamp, rec.id),
                "user_id": user_id,
                "recommendation_id": rec.id,
                "type": rec.category.value,
                "title": rec.title,
                "description": rec.description,
                "priority": rec.priority.value,
                # DynamoDB numbers must be Decimal, not float
                "confidence_score": Decimal(rec.confidence) / Decimal(100),
                "created_at": timestamp,
                "expires_at": expires_at.isoformat(),
                "ttl": int(expires_at.timestamp())
            }
            for rec in recommendations
        ]

    def store_recommendations(
        self,
        user_id: str,
        recommendations: List[Recommendation],
        generated_at: Optional[datetime] = None
    ) -> int:
        """
        Append generated recommendations for analytics.

        Args:
            user_id: Authenticated user ID
            recommendations: Ranked recommendations to store
            generated_at: Generation timestamp, defaults to now

        Returns:
            Number of items written

        Raises:
            UpstreamUnavailableError: If the table cannot be written
        """
        if generated_at is None:
            generated_at = datetime.now(timezone.utc)
        items = self.build_recommendation_items(user_id, recommendations, generated_at)
        if not items:
            return 0

        try:
            self.dynamo.batch_put_items(items)
        except Exception as e:
            logger.error("Error storing recommendations", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamUnavailableError(f"Failed to store recommendations: {str(e)}")

        logger.info("Stored recommendations", extra={
            "user_id": user_id,
            "count": len(items),
            "ttl_days": self.ttl_days
        })
        return len(items)

    def log_conversation(
        self,
        user_id: str,
        message: str,
        reply: ChatResponse
    ) -> None:
        """
        Append a chat exchange to the user's conversation log.

        Args:
            user_id: Authenticated user ID
            message: Message sent by the user
            reply: Generated reply

        Raises:
            UpstreamUnavailableError: If the table cannot be written
        """
        timestamp = reply.timestamp.isoformat()
        try:
            self.dynamo.put_item({
                "PK": create_pk(user_id),
                "SK": create_conversation_sk(timestamp),
                "user_id": user_id,
                "message": message,
                "response": reply.response,
                "sentiment": reply.sentiment.value,
                "created_at": timestamp
            })
        except Exception as e:
            logger.error("Error logging conversation", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise UpstreamUnavailableError(f"Failed to log conversation: {str(e)}")
