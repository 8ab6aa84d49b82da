"""
API routes for the coding challenge platform.
"""

from fastapi import APIRouter

from codearena.api.auth import router as auth_router
from codearena.api.problems import router as problems_router
from codearena.api.submissions import router as submissions_router
from codearena.api.profile import router as profile_router
from codearena.api.upload import router as upload_router

# Create main API router
api_router = APIRouter(prefix="/api/v1")

# Include all sub-routers
api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(problems_router, prefix="/problems", tags=["Problems"])
api_router.include_router(submissions_router, prefix="/submissions", tags=["Submissions"])
api_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
api_router.include_router(upload_router, prefix="/upload", tags=["Upload"])
