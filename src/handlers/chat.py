"""
Lambda handler for the rule-based support chat.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.chat import ChatRequest
from src.services.chat import generate_chat_response
from src.services.exceptions import InputValidationError, UpstreamUnavailableError
from src.services.insights_store import InsightsStore
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response
from src.utils.validation import load_request

tracer = Tracer()

_store = None

def get_store() -> InsightsStore:
    """Get or create the insights store."""
    global _store
    if _store is None:
        _store = InsightsStore()
    return _store

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle a chat message.
    
    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID
        
    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = load_request(event, ChatRequest)
    except InputValidationError as e:
        logger.warning("Invalid chat request", extra={"error": str(e)})
        return error_response(400, "Message is required and must be a string")
    
    reply = generate_chat_response(request.message)
    
    try:
        get_store().log_conversation(user_id, request.message, reply)
    except UpstreamUnavailableError as e:
        logger.warning("Chat reply returned without being logged", extra={"error": str(e)})
    
    return json_response(200, reply.model_dump(mode="json"))
