"""Admin-only user management endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from betgate.core.dependencies import get_gateway, get_token, unwrap
from betgate.schemas.user import UserSummaryRead
from betgate.services.gateway import Gateway

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserSummaryRead])
async def list_users(
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
) -> list[UserSummaryRead]:
    users = unwrap(gateway.list_users(token))
    return [UserSummaryRead.model_validate(user) for user in users]


@router.post("/{username}/ban", status_code=status.HTTP_204_NO_CONTENT)
async def ban_user(
    username: str,
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
) -> None:
    unwrap(gateway.ban_user(token, username))
