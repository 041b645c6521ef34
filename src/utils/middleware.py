"""
Middleware functions for request processing.
"""
from functools import wraps
from typing import Any, Callable, Dict, Optional

from src.utils.logging import logger
from src.utils.responses import error_response

def extract_user_id(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the authenticated user ID placed in the event by API Gateway.
    
    Supports Cognito user pool authorizers (REST API), JWT authorizers
    (HTTP API) and Lambda authorizers exposing a principalId.
    
    Args:
        event: API Gateway Lambda proxy event
        
    Returns:
        User ID if the request was authenticated, None otherwise
    """
    if not isinstance(event, dict):
        return None
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    
    claims = authorizer.get("claims") or (authorizer.get("jwt") or {}).get("claims") or {}
    user_id = claims.get("sub") or authorizer.get("principalId")
    return str(user_id) if user_id else None

def require_user(f: Callable) -> Callable:
    """
    Decorator passing the authenticated user ID to a handler.
    
    Identity is verified upstream by the API Gateway authorizer; requests
    reaching the handler without one are answered with 401.
    
    Args:
        f: Handler function taking (event, context, user_id)
        
    Returns:
        Wrapped handler function taking (event, context)
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], context: Any, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        user_id = extract_user_id(event)
        if not user_id:
            logger.warning("Unauthenticated request rejected", extra={
                "path": event.get("path") if isinstance(event, dict) else None
            })
            return error_response(401, "Invalid authentication token")
        
        logger.append_keys(user_id=user_id)
        return f(event, context, user_id, *args, **kwargs)
    
    return wrapped
