"""Token issuance and resolution."""
from __future__ import annotations

import logging
import uuid

from betgate.core.errors import ErrorKind, GateError

logger = logging.getLogger(__name__)


def new_token() -> str:
    """Return a fresh opaque token. Callers must not parse it."""

    return str(uuid.uuid4())


class SessionAuthority:
    """Binds live tokens to usernames, at most one token per user."""

    def __init__(self) -> None:
        self._by_token: dict[str, str] = {}
        self._by_user: dict[str, str] = {}

    def issue_token(self, username: str) -> str:
        """Bind a fresh token to ``username``, replacing any previous one.

        The previous holder is not notified; its token simply stops resolving.
        Only call this after the credentials have been verified.
        """

        previous = self._by_user.pop(username, None)
        if previous is not None:
            del self._by_token[previous]
            logger.debug("Replaced existing session for %s", username)

        token = new_token()
        self._by_token[token] = username
        self._by_user[username] = token
        return token

    def resolve(self, token: str) -> str:
        username = self._by_token.get(token)
        if username is None:
            raise GateError(ErrorKind.NOT_AUTHORIZED)
        return username

    def revoke(self, token: str) -> str:
        username = self._by_token.pop(token, None)
        if username is None:
            raise GateError(ErrorKind.NOT_AUTHORIZED)
        del self._by_user[username]
        return username

    def active_sessions(self) -> int:
        return len(self._by_token)
