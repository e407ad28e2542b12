"""Directory, session authority and the gateway composing them."""
from .directory import Directory
from .gateway import Gateway
from .sessions import SessionAuthority

__all__ = ["Directory", "Gateway", "SessionAuthority"]
