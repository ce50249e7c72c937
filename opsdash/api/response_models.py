"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loading: bool
    loaded: bool
    records: int
    counts: dict[str, int]


class QuickRangeOption(BaseModel):
    id: str
    label: str
    start: str
    end: str


class DatesResponse(BaseModel):
    dates: list[str]
    earliest: Optional[str] = None
    latest: Optional[str] = None
    quickRanges: list[QuickRangeOption]


class ReloadResponse(BaseModel):
    status: str
    message: str


class RecordsResponse(BaseModel):
    domain: str
    range: dict[str, str]
    count: int
    records: list[dict[str, Any]]
