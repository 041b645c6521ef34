"""
Lambda handler for the PCOS symptom analyzer endpoint.
"""
from typing import Any, Dict, List
from datetime import datetime, timezone

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.signals import SymptomAnalysisRequest, SymptomAnalysisResponse
from src.services.classifier import (
    classification_confidence,
    get_pcos_profile,
    get_symptom_details,
    score_symptoms,
    select_category
)
from src.services.exceptions import InputValidationError
from src.utils.logging import logger
from src.utils.middleware import require_user
from src.utils.responses import error_response, json_response
from src.utils.validation import load_request

tracer = Tracer()

def analyze_symptoms(symptoms: List[str], user_id: str) -> SymptomAnalysisResponse:
    """
    Classify symptoms and describe the resulting PCOS type.
    
    Args:
        symptoms: Symptom tags reported by the user
        user_id: Authenticated user ID
        
    Returns:
        Analysis with the PCOS type, confidence, tallies, type profile and
        catalogue entries of the recognized symptoms
    """
    tally = score_symptoms(symptoms)
    category = select_category(tally)
    return SymptomAnalysisResponse(
        pcos_type=category.value,
        confidence=classification_confidence(symptoms),
        scores={key.value: value for key, value in tally.items()},
        profile=get_pcos_profile(category).model_dump(mode="json", by_alias=True),
        symptoms=[s.model_dump(mode="json") for s in get_symptom_details(symptoms)],
        generated_at=datetime.now(timezone.utc),
        user_id=user_id
    )

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Handle symptom analysis request.
    
    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID
        
    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = load_request(event, SymptomAnalysisRequest)
    except InputValidationError as e:
        logger.warning("Invalid symptom analysis request", extra={"error": str(e)})
        return error_response(400, str(e))
    
    try:
        result = analyze_symptoms(request.symptoms, user_id)
    except Exception:
        logger.exception("Error analyzing symptoms")
        return error_response(500, "Unable to analyze symptoms, please try again")
    
    logger.info("Symptoms analyzed", extra={
        "pcos_type": result.pcos_type,
        "confidence": result.confidence
    })
    return json_response(200, result.model_dump(mode="json", by_alias=True))
