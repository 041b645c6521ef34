"""
Lambda handler for the personalized recommendations endpoint.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.recommendation import RecommendationResponse
from src.models.signals import RecommendationRequest
from src.services.exceptions import InputValidationError, UpstreamUnavailableError
from src.services.insights_store import InsightsStore
from src.services.recommendation import RecommendationEngine
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import GENERIC_ERROR_MESSAGE, error_response, json_response
from src.utils.validation import load_request

tracer = Tracer()

# Initialize shared store (lazy loading)
_store = None

def get_store() -> InsightsStore:
    """Get or create the insights store."""
    global _store
    if _store is None:
        _store = InsightsStore()
    return _store

def persist_recommendations(user_id: str, response: RecommendationResponse) -> bool:
    """
    Store generated recommendations without failing the request.
    
    Returns:
        True if stored, False if the data store was unavailable
    """
    try:
        get_store().store_recommendations(
            user_id,
            response.recommendations,
            response.generated_at
        )
        return True
    except UpstreamUnavailableError as e:
        logger.warning("Recommendations returned without being stored", extra={
            "user_id": user_id,
            "error": str(e)
        })
        return False

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle recommendations request.
    
    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID
        
    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = load_request(event, RecommendationRequest)
    except InputValidationError as e:
        logger.warning("Invalid recommendations request", extra={"error": str(e)})
        return error_response(400, str(e))
    
    try:
        response = RecommendationEngine(user_id).generate_recommendations(request)
    except Exception:
        logger.exception("Error generating recommendations", extra={"user_id": user_id})
        return error_response(500, GENERIC_ERROR_MESSAGE)
    
    persist_recommendations(user_id, response)
    
    return json_response(200, response.model_dump(mode="json", exclude_none=True))
