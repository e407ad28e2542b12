"""Domain models exposed for imports."""
from .user import Role, User, UserSummary

__all__ = ["Role", "User", "UserSummary"]
