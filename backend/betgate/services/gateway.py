"""Per-operation composition of session resolution and role checks."""
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Callable, TypeVar

from betgate.core.errors import ErrorKind, GateError, Outcome
from betgate.models.user import Role, User, UserSummary
from betgate.services.directory import Directory
from betgate.services.sessions import SessionAuthority

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Gateway:
    """Context object holding one directory and one session authority.

    Every operation runs under a single lock and reports its result as an
    ``Outcome``. A failed operation leaves both components untouched.
    """

    def __init__(
        self,
        directory: Directory | None = None,
        sessions: SessionAuthority | None = None,
    ) -> None:
        self.directory = directory or Directory()
        self.sessions = sessions or SessionAuthority()
        self._lock = threading.Lock()

    def _run(self, operation: Callable[[], T]) -> Outcome[T]:
        with self._lock:
            try:
                return Outcome.success(operation())
            except GateError as exc:
                return Outcome.failure(exc.kind)

    def _resolve_user(self, token: str) -> User:
        username = self.sessions.resolve(token)
        logger.debug("Resolved session for %s", username)
        user = self.directory.get(username)
        if user is None:
            raise GateError(ErrorKind.NOT_AUTHORIZED)
        return user

    def _resolve_admin(self, token: str) -> User:
        user = self._resolve_user(token)
        if user.role is not Role.ADMIN:
            raise GateError(ErrorKind.ACCESS_DENIED)
        return user

    def has_users(self) -> bool:
        with self._lock:
            return self.directory.has_users()

    def register(self, username: str, password: str, role: Role = Role.REGULAR) -> Outcome[None]:
        def operation() -> None:
            self.directory.register(username, password, role)

        return self._run(operation)

    def login(self, username: str, password: str) -> Outcome[str]:
        def operation() -> str:
            try:
                user = self.directory.verify_credentials(username, password)
            except GateError as exc:
                logger.warning("Rejected login for %s: %s", username, exc.kind.value)
                raise
            token = self.sessions.issue_token(user.username)
            logger.info(
                "User %s logged in (%d active sessions)", username, self.sessions.active_sessions()
            )
            return token

        return self._run(operation)

    def logout(self, token: str) -> Outcome[None]:
        def operation() -> None:
            username = self.sessions.revoke(token)
            logger.info("User %s logged out", username)

        return self._run(operation)

    def whoami(self, token: str) -> Outcome[User]:
        def operation() -> User:
            user = self._resolve_user(token)
            return replace(user, bets=list(user.bets))

        return self._run(operation)

    def place_bet(self, token: str, bet: str) -> Outcome[None]:
        def operation() -> None:
            user = self._resolve_user(token)
            self.directory.append_bet(user.username, bet)

        return self._run(operation)

    def list_own_bets(self, token: str) -> Outcome[list[str]]:
        def operation() -> list[str]:
            user = self._resolve_user(token)
            return self.directory.list_bets(user.username)

        return self._run(operation)

    def list_users(self, token: str) -> Outcome[list[UserSummary]]:
        def operation() -> list[UserSummary]:
            self._resolve_admin(token)
            return self.directory.list_regular_users()

        return self._run(operation)

    def ban_user(self, token: str, target_username: str) -> Outcome[None]:
        def operation() -> None:
            # Caller role is checked before the target's existence.
            self._resolve_admin(token)
            self.directory.ban(target_username)

        return self._run(operation)
