"""Minimal result type for calls whose failure is an expected outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    reason: str
    status_code: Optional[int] = None


Result = Union[Ok[T], Err]
