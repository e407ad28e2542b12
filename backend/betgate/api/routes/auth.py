"""Authentication endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from betgate.core.config import Settings
from betgate.core.dependencies import get_gateway, get_settings_dep, get_token, unwrap
from betgate.core.security import SessionSigner
from betgate.schemas.auth import AuthStatus, LoginRequest, TokenResponse
from betgate.schemas.user import CurrentUserRead, UserCreate, UserRead
from betgate.services.gateway import Gateway

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status", response_model=AuthStatus)
async def auth_status(gateway: Gateway = Depends(get_gateway)) -> AuthStatus:
    return AuthStatus(has_users=gateway.has_users())


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(payload: UserCreate, gateway: Gateway = Depends(get_gateway)) -> UserRead:
    unwrap(gateway.register(payload.username, payload.password, payload.role))
    return UserRead(username=payload.username, role=payload.role)


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    gateway: Gateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings_dep),
) -> TokenResponse:
    token = unwrap(gateway.login(payload.username, payload.password))
    # No max_age: the session lives until logout or the next login.
    response.set_cookie(
        key=settings.session_cookie_name,
        value=SessionSigner(settings).dumps(token),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return TokenResponse(access_token=token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    response: Response,
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings_dep),
) -> None:
    unwrap(gateway.logout(token))
    response.delete_cookie(settings.session_cookie_name)


@router.get("/me", response_model=CurrentUserRead)
async def get_current_user_info(
    token: str = Depends(get_token),
    gateway: Gateway = Depends(get_gateway),
) -> CurrentUserRead:
    user = unwrap(gateway.whoami(token))
    return CurrentUserRead.model_validate(user)
