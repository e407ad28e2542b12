"""Bet payloads. Bet text is opaque to the service."""
from __future__ import annotations

from pydantic import BaseModel, Field


class BetCreate(BaseModel):
    bet: str = Field(..., min_length=1)


class BetRead(BaseModel):
    bet: str
