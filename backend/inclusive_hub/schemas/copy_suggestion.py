"""Pydantic models for inclusive copy generation."""

from typing import List, Literal, Optional

from pydantic import Field, field_validator

from inclusive_hub.schemas.bias import Language
from inclusive_hub.schemas.common import CamelModel


Tone = Literal["professional", "friendly", "casual", "formal", "enthusiastic", "empathetic"]


class Engagement(CamelModel):
    predicted: float
    confidence: float


class CopyVariant(CamelModel):
    """One rewrite of the original copy in a given tone."""

    id: str
    text: str
    language: str
    tone: str
    inclusivity_score: int = Field(ge=0, le=100)
    bias_score: int = Field(ge=0, le=100)
    engagement: Engagement
    highlights: List[str] = Field(default_factory=list)


class CopyMetadata(CamelModel):
    target_audience: str
    tone: str
    inclusivity_score: int = Field(ge=0, le=100)


class CopySuggestion(CamelModel):
    id: str
    campaign_id: str
    language: str
    original: str
    suggestions: List[CopyVariant] = Field(default_factory=list)
    created_at: str
    metadata: CopyMetadata


class CopyGenerationRequest(CamelModel):
    """Request body for ``POST /api/copy``."""

    campaign_id: Optional[str] = Field(None, max_length=255)
    prompt: str = Field(..., max_length=5000)
    language: Optional[Language] = None
    tone: Tone = "friendly"

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt cannot be empty")
        return v
