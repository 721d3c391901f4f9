"""Aggregate API v1 router."""

from fastapi import APIRouter

from powerball_watch.api.v1.endpoints import categories, check, draws, ticket

api_router = APIRouter()

api_router.include_router(ticket.router, prefix="/ticket", tags=["ticket"])
api_router.include_router(draws.router, prefix="/draws", tags=["draws"])
api_router.include_router(check.router, prefix="/check", tags=["check"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
