"""Error kinds and the tagged outcome type returned by gateway operations."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Closed set of rejections an operation can produce."""

    USERNAME_TAKEN = "username_taken"
    WRONG_USERNAME = "wrong_username"
    WRONG_PASSWORD = "wrong_password"
    ACCESS_DENIED = "access_denied"
    NOT_AUTHORIZED = "not_authorized"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.USERNAME_TAKEN: "Username is taken",
    ErrorKind.WRONG_USERNAME: "Wrong username",
    ErrorKind.WRONG_PASSWORD: "Wrong password",
    ErrorKind.ACCESS_DENIED: "Access denied",
    ErrorKind.NOT_AUTHORIZED: "Not authorized",
}


class GateError(Exception):
    """Raised by the directory and session authority to reject a call."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or exactly one error kind."""

    value: T | None = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind) -> "Outcome[T]":
        return cls(error=kind)
