"""Route modules for the Betgate API."""
from . import auth, bets, users

__all__ = ["auth", "bets", "users"]
