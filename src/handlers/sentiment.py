"""
Lambda handler for journal sentiment analysis.
"""
from typing import Any, Dict
from datetime import datetime, timezone

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.chat import SentimentRequest, SentimentResult
from src.services.exceptions import InputValidationError
from src.services.sentiment import analyze_sentiment, score_sentiment
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response
from src.utils.validation import load_request

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle sentiment analysis of a journal entry.
    
    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID
        
    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = load_request(event, SentimentRequest)
    except InputValidationError as e:
        return error_response(400, str(e))
    
    result = SentimentResult(
        sentiment=analyze_sentiment(request.content),
        score=score_sentiment(request.content),
        generated_at=datetime.now(timezone.utc)
    )
    return json_response(200, result.model_dump(mode="json"))
