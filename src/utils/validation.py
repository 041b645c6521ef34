"""
Request body validation helpers.
"""
import json
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.services.exceptions import InputValidationError
from src.utils.responses import parse_body

ModelT = TypeVar("ModelT", bound=BaseModel)

def describe_validation_error(error: ValidationError) -> str:
    """Summarize pydantic errors as 'field: message' pairs."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        parts.append(f"{location}: {detail.get('msg')}" if location else detail.get("msg"))
    return "; ".join(parts)

def load_request(event: Dict[str, Any], model: Type[ModelT]) -> ModelT:
    """
    Parse and validate the JSON body of a proxy event.
    
    Args:
        event: API Gateway Lambda proxy event
        model: Pydantic model describing the body
        
    Returns:
        Validated model instance
        
    Raises:
        InputValidationError: If the body is not JSON, not an object, or
            does not match the model
    """
    try:
        body = parse_body(event)
    except json.JSONDecodeError as e:
        raise InputValidationError(f"Request body is not valid JSON: {e.msg}")
    
    if not isinstance(body, dict):
        raise InputValidationError("Request body must be a JSON object")
    
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise InputValidationError(describe_validation_error(e))
