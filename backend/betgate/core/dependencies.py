"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from fastapi import HTTPException, Request, status

from betgate.core.config import Settings
from betgate.core.errors import ErrorKind, Outcome
from betgate.core.security import SessionSigner
from betgate.services.gateway import Gateway

ERROR_STATUS = {
    ErrorKind.USERNAME_TAKEN: status.HTTP_409_CONFLICT,
    ErrorKind.WRONG_USERNAME: status.HTTP_404_NOT_FOUND,
    ErrorKind.WRONG_PASSWORD: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_AUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
}


def error_response(kind: ErrorKind) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS[kind],
        detail=kind.message,
        headers={"X-Error-Kind": kind.value},
    )


def unwrap(outcome: Outcome):
    """Return the outcome's value or raise the matching HTTP error."""
    if not outcome.ok:
        raise error_response(outcome.error)
    return outcome.value


def get_gateway(request: Request) -> Gateway:
    return request.app.state.gateway


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_token(request: Request) -> str:
    """Read the bearer token, falling back to the signed session cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    settings: Settings = request.app.state.settings
    cookie = request.cookies.get(settings.session_cookie_name)
    if not cookie:
        raise error_response(ErrorKind.NOT_AUTHORIZED)
    try:
        return SessionSigner(settings).loads(cookie)
    except ValueError as exc:
        raise error_response(ErrorKind.NOT_AUTHORIZED) from exc
