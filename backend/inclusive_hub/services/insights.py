"""Turn an upstream result (or its absence) into a normalized bias or copy payload."""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger

from inclusive_hub.core.result import Err, Ok, Result
from inclusive_hub.schemas.bias import BiasInsight
from inclusive_hub.schemas.copy_suggestion import CopySuggestion
from inclusive_hub.services.mock_data import MockDataGenerator
from inclusive_hub.services.normalizer import (
    DEFAULT_CAMPAIGN_ID,
    normalize_bias_response,
    normalize_copy_response,
)


def bias_insight_from(
    result: Optional[Result[Dict[str, Any]]],
    generator: MockDataGenerator,
    campaign_id: Optional[str],
) -> BiasInsight:
    """Normalize a live response, or fall back to a mock insight.

    ``result`` is ``None`` when live mode is off.
    """
    if isinstance(result, Ok):
        try:
            return normalize_bias_response(result.value, campaign_id)
        except (ValueError, TypeError, OverflowError) as exc:
            result = Err(f"unusable response: {exc}")
    if isinstance(result, Err):
        logger.bind(reason=result.reason, status=result.status_code).warning(
            "kolosal_bias_fallback"
        )

    mock = generator.bias_insight(campaign_id or DEFAULT_CAMPAIGN_ID)
    return normalize_bias_response(mock.model_dump(by_alias=True), campaign_id)


def copy_suggestion_from(
    result: Optional[Result[Dict[str, Any]]],
    generator: MockDataGenerator,
    campaign_id: Optional[str],
    language: str,
    tone: Optional[str],
) -> CopySuggestion:
    """Normalize a live response, or fall back to mock variants filtered by tone.

    A tone with no mock variant (``formal``) leaves the full set in place.
    """
    if isinstance(result, Ok):
        try:
            return normalize_copy_response(result.value, campaign_id, language, tone)
        except (ValueError, TypeError, OverflowError) as exc:
            result = Err(f"unusable response: {exc}")
    if isinstance(result, Err):
        logger.bind(reason=result.reason, status=result.status_code).warning(
            "kolosal_copy_fallback"
        )

    mock = generator.copy_suggestion(campaign_id or DEFAULT_CAMPAIGN_ID, language)
    if tone:
        matching = [variant for variant in mock.suggestions if variant.tone == tone]
        if matching:
            mock = mock.model_copy(update={"suggestions": matching})
    return normalize_copy_response(mock.model_dump(by_alias=True), campaign_id, language, tone)
