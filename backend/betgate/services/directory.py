"""User registry: registration, credential checks, bets and bans."""
from __future__ import annotations

import logging

from betgate.core.errors import ErrorKind, GateError
from betgate.models.user import Role, User, UserSummary

logger = logging.getLogger(__name__)


class Directory:
    """Source of truth for registered users, keyed by username."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def get(self, username: str) -> User | None:
        return self._users.get(username)

    def has_users(self) -> bool:
        return bool(self._users)

    def register(self, username: str, password: str, role: Role = Role.REGULAR) -> User:
        if username in self._users:
            raise GateError(ErrorKind.USERNAME_TAKEN)
        user = User(username=username, password=password, role=role)
        self._users[username] = user
        logger.info("Registered %s user %s", role.value, username)
        return user

    def verify_credentials(self, username: str, password: str) -> User:
        """Check username, then password, then ban status, in that order."""
        user = self._users.get(username)
        if user is None:
            raise GateError(ErrorKind.WRONG_USERNAME)
        if user.password != password:
            raise GateError(ErrorKind.WRONG_PASSWORD)
        if user.is_banned:
            raise GateError(ErrorKind.ACCESS_DENIED)
        return user

    def append_bet(self, username: str, bet: str) -> None:
        self._require(username).bets.append(bet)

    def list_bets(self, username: str) -> list[str]:
        return list(self._require(username).bets)

    def list_regular_users(self) -> list[UserSummary]:
        return [
            UserSummary(username=user.username, is_banned=user.is_banned)
            for user in self._users.values()
            if user.role is Role.REGULAR
        ]

    def ban(self, username: str) -> None:
        user = self._require(username)
        # Admins cannot be banned.
        if user.role is not Role.REGULAR:
            raise GateError(ErrorKind.ACCESS_DENIED)
        if not user.is_banned:
            user.is_banned = True
            logger.info("Banned user %s", username)

    def _require(self, username: str) -> User:
        user = self._users.get(username)
        if user is None:
            raise GateError(ErrorKind.WRONG_USERNAME)
        return user
