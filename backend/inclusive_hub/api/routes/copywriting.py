"""Inclusive copy generation endpoint: live Kolosal call with mock fallback."""

from typing import Optional

from fastapi import APIRouter, Depends

from inclusive_hub.core.concurrency import run_upstream_call
from inclusive_hub.core.deps import get_generator, get_kolosal_client
from inclusive_hub.schemas.common import ApiResponse
from inclusive_hub.schemas.copy_suggestion import CopyGenerationRequest, CopySuggestion
from inclusive_hub.services.insights import copy_suggestion_from
from inclusive_hub.services.kolosal import KolosalClient
from inclusive_hub.services.mock_data import MockDataGenerator

router = APIRouter(prefix="/copy", tags=["copy"])


@router.post("", response_model=ApiResponse[CopySuggestion], response_model_exclude_none=True)
async def generate_copy(
    payload: CopyGenerationRequest,
    generator: MockDataGenerator = Depends(get_generator),
    client: Optional[KolosalClient] = Depends(get_kolosal_client),
):
    language = payload.language or "en"
    result = None
    if client is not None:
        result = await run_upstream_call(
            client.generate_copy, payload.prompt, language, payload.tone, payload.campaign_id
        )
    suggestion = copy_suggestion_from(result, generator, payload.campaign_id, language, payload.tone)
    return ApiResponse[CopySuggestion](data=suggestion)
