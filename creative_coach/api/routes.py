from fastapi import APIRouter
import logging

from creative_coach.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "message": "🚀 Backend is running smoothly!"
    }
