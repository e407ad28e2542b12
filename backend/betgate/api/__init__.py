"""API router aggregator."""
from fastapi import APIRouter

from betgate.api.routes import auth, bets, users

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(bets.router)
api_router.include_router(users.router)

__all__ = ["api_router"]
