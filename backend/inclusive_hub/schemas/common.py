"""Shared Pydantic building blocks: camelCase base model and response envelopes."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def utc_now_iso() -> str:
    """Current UTC time as ``2024-05-01T08:30:00.123Z``."""
    return format_timestamp(datetime.now(timezone.utc))


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, matching how scores are reported."""
    return int(math.floor(value + 0.5))


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class ApiResponse(CamelModel, Generic[T]):
    """Uniform success envelope returned by every endpoint."""

    data: T
    success: bool = True
    message: Optional[str] = None
    timestamp: str = Field(default_factory=utc_now_iso)


class ErrorResponse(CamelModel):
    """Uniform failure envelope."""

    success: bool = False
    message: str
    errors: Optional[List[str]] = None
    timestamp: str = Field(default_factory=utc_now_iso)
