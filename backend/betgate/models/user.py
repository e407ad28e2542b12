"""In-memory model for registered users."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    REGULAR = "regular"


@dataclass
class User:
    """Registered principal with a plaintext password, a role and its bets."""

    username: str
    password: str
    role: Role = Role.REGULAR
    bets: list[str] = field(default_factory=list)
    is_banned: bool = False


@dataclass(frozen=True)
class UserSummary:
    """Snapshot row handed out when listing users."""

    username: str
    is_banned: bool
