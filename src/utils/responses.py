"""
Builders for API Gateway Lambda proxy responses.
"""
import json
from typing import Any, Dict
from datetime import datetime, timezone

JSON_HEADERS = {"Content-Type": "application/json"}

GENERIC_ERROR_MESSAGE = "Unable to generate recommendations, please try again"

def json_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a JSON-serializable body in a proxy response."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body)
    }

def error_response(status_code: int, message: str) -> Dict[str, Any]:
    """Build an error response carrying a message and timestamp."""
    return json_response(status_code, {
        "error": message,
        "timestamp": datetime.now(timezone.utc).isoformat()
    })

def parse_body(event: Dict[str, Any]) -> Any:
    """
    Decode the JSON body of a proxy event.
    
    Args:
        event: API Gateway Lambda proxy event
        
    Returns:
        Parsed body, or an empty dict when the event has no body
        
    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    body = event.get("body")
    if body is None or body == "":
        return {}
    if isinstance(body, (dict, list)):
        return body
    return json.loads(body)
