"""Signing of the session cookie that carries the opaque token."""
from __future__ import annotations

from itsdangerous import BadSignature, URLSafeSerializer

from .config import Settings, get_settings


class SessionSigner:
    """Sign and unsign session tokens for the cookie transport.

    The signature carries no timestamp; a token stays valid until logout or
    the next login for the same user.
    """

    def __init__(self, settings: Settings | None = None, salt: str = "betgate-session") -> None:
        settings = settings or get_settings()
        self._serializer = URLSafeSerializer(settings.secret_key, salt=salt)

    def dumps(self, token: str) -> str:
        return self._serializer.dumps(token)

    def loads(self, value: str) -> str:
        try:
            token = self._serializer.loads(value)
        except BadSignature as exc:
            raise ValueError("Invalid session cookie") from exc
        if not isinstance(token, str):
            raise ValueError("Invalid session cookie")
        return token
