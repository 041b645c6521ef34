"""
Service module for PCOS type classification from self-reported symptoms.

Each recognized symptom adds one vote to every category it is evidence for;
the category with the highest tally wins, ties resolving in the fixed order
insulin-resistant, inflammatory, adrenal, post-pill.

Typical usage:
    >>> classify(["weight-gain", "sugar-cravings"])
    <PCOSCategory.INSULIN_RESISTANT: 'insulin-resistant'>
"""
from typing import Dict, Iterable, List, Optional

from aws_lambda_powertools import Logger

from src.models.pcos import PCOSCategory, PCOSTypeProfile, Symptom
from src.services.constants import (
    PCOS_CATEGORY_PRIORITY,
    PCOS_TYPE_PROFILES,
    SYMPTOM_CATEGORY_MAP,
    SYMPTOMS
)

logger = Logger()


def recognized_symptoms(symptoms: Optional[Iterable[str]]) -> List[str]:
    """
    Drop unknown tags and duplicates, keeping first-seen order.

    Args:
        symptoms: Symptom tags supplied by the caller

    Returns:
        Distinct symptom tags present in the vocabulary
    """
    seen = []
    for symptom in symptoms or []:
        if symptom in SYMPTOM_CATEGORY_MAP and symptom not in seen:
            seen.append(symptom)
    return seen


def score_symptoms(symptoms: Optional[Iterable[str]]) -> Dict[PCOSCategory, int]:
    """
    Tally category votes for a set of symptom tags.

    Args:
        symptoms: Symptom tags, unknown tags are ignored

    Returns:
        Tally for every category, zero when no evidence was found
    """
    tally = {category: 0 for category in PCOS_CATEGORY_PRIORITY}
    for symptom in recognized_symptoms(symptoms):
        for category in SYMPTOM_CATEGORY_MAP[symptom]:
            tally[category] += 1
    return tally


def select_category(tally: Dict[PCOSCategory, int]) -> PCOSCategory:
    """Pick the highest tally, earlier categories winning ties."""
    best = PCOS_CATEGORY_PRIORITY[0]
    for category in PCOS_CATEGORY_PRIORITY[1:]:
        if tally.get(category, 0) > tally.get(best, 0):
            best = category
    return best


def classify(symptoms: Optional[Iterable[str]]) -> PCOSCategory:
    """
    Classify a symptom set into a single PCOS category.

    Never raises: an empty or fully unrecognized list resolves to
    insulin-resistant through the tie-break order.

    Args:
        symptoms: Symptom tags supplied by the caller

    Returns:
        The selected PCOS category

    Example:
        >>> classify(["acne"])
        <PCOSCategory.INSULIN_RESISTANT: 'insulin-resistant'>
    """
    tally = score_symptoms(symptoms)
    category = select_category(tally)
    logger.debug("Classified PCOS type", extra={
        "pcos_type": category.value,
        "tally": {key.value: value for key, value in tally.items()}
    })
    return category


def classification_confidence(symptoms: Optional[Iterable[str]]) -> float:
    """
    Share of distinct recognized symptoms that support the winning category.

    Args:
        symptoms: Symptom tags supplied by the caller

    Returns:
        Value in [0, 1] rounded to two decimals, 0.0 without recognized symptoms
    """
    recognized = recognized_symptoms(symptoms)
    if not recognized:
        return 0.0
    tally = score_symptoms(recognized)
    winner = select_category(tally)
    return round(tally[winner] / len(recognized), 2)


def get_pcos_profile(category: PCOSCategory) -> PCOSTypeProfile:
    """Get the descriptive profile for a PCOS category."""
    return PCOS_TYPE_PROFILES[PCOSCategory(category)]


def get_symptom_details(symptoms: Optional[Iterable[str]]) -> List[Symptom]:
    """
    Look up catalogue entries for the recognized symptoms.

    Args:
        symptoms: Symptom tags supplied by the caller

    Returns:
        Catalogue entries in the order the symptoms were first reported
    """
    catalogue = {symptom.id: symptom for symptom in SYMPTOMS}
    return [catalogue[s] for s in recognized_symptoms(symptoms) if s in catalogue]
