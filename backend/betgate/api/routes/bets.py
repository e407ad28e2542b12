"""Bet endpoints for the logged-in user."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from betgate.core.dependencies import get_gateway, get_token, unwrap
from betgate.schemas.bet import BetCreate, BetRead
from betgate.services.gateway import Gateway

router = APIRouter(prefix="/bets", tags=["bets"])


@router.get("", response_model=list[str])
async def list_own_bets(
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
) -> list[str]:
    return unwrap(gateway.list_own_bets(token))


@router.post("", response_model=BetRead, status_code=status.HTTP_201_CREATED)
async def place_bet(
    payload: BetCreate,
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
) -> BetRead:
    unwrap(gateway.place_bet(token, payload.bet))
    return BetRead(bet=payload.bet)
