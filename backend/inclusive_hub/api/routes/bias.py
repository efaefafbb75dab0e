"""Bias check endpoint: live Kolosal call with mock fallback."""

from typing import Optional

from fastapi import APIRouter, Depends

from inclusive_hub.core.concurrency import run_upstream_call
from inclusive_hub.core.deps import get_generator, get_kolosal_client
from inclusive_hub.schemas.bias import BiasCheckRequest, BiasInsight
from inclusive_hub.schemas.common import ApiResponse
from inclusive_hub.services.insights import bias_insight_from
from inclusive_hub.services.kolosal import KolosalClient
from inclusive_hub.services.mock_data import MockDataGenerator

router = APIRouter(prefix="/bias", tags=["bias"])


@router.post("", response_model=ApiResponse[BiasInsight], response_model_exclude_none=True)
async def check_bias(
    payload: BiasCheckRequest,
    generator: MockDataGenerator = Depends(get_generator),
    client: Optional[KolosalClient] = Depends(get_kolosal_client),
):
    language = payload.language or "en"
    result = None
    if client is not None:
        result = await run_upstream_call(
            client.check_bias, payload.content, language, payload.campaign_id
        )
    insight = bias_insight_from(result, generator, payload.campaign_id)
    return ApiResponse[BiasInsight](data=insight)
