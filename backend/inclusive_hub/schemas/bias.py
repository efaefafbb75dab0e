"""Pydantic models for bias detection."""

from typing import List, Literal, Optional

from pydantic import Field, field_validator

from inclusive_hub.schemas.common import CamelModel

BIAS_TYPES = (
    "gender",
    "age",
    "economic",
    "religious",
    "ethnic",
    "disability",
    "appearance",
)

Language = Literal["en", "id"]


def severity_for(score: int) -> str:
    if score < 30:
        return "low"
    if score < 60:
        return "medium"
    if score < 80:
        return "high"
    return "critical"


class BiasDetection(CamelModel):
    type: str
    description: str
    affected_text: str = ""
    score: int = Field(ge=0, le=100)
    recommendation: str
    examples: List[str] = Field(default_factory=list)


class BiasMetadata(CamelModel):
    model_version: str
    confidence: float


class BiasInsight(CamelModel):
    """Bias report for one piece of marketing copy."""

    id: str
    campaign_id: str
    detected_at: str
    overall_score: int = Field(ge=0, le=100)
    severity: str
    biases: List[BiasDetection] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    metadata: BiasMetadata


class BiasCheckRequest(CamelModel):
    """Request body for ``POST /api/bias``."""

    campaign_id: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., max_length=10000)
    language: Optional[Language] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content cannot be empty")
        return v
