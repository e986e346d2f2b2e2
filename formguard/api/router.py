"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from formguard.api.health import router as health_router
from formguard.api.submissions import router as submissions_router
from formguard.api.validation import router as validation_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Stateless validation for pre-submit checks
api_router.include_router(validation_router, tags=["Validation"])

# Submissions CRUD
api_router.include_router(submissions_router, tags=["Submissions"])
