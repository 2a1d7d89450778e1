"""API module for FastAPI endpoints."""

from onboarding_gateway.api.lookup_routes import router as lookup_router
from onboarding_gateway.api.verify_routes import router as verify_router

__all__ = ["lookup_router", "verify_router"]
