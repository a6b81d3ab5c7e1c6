"""
Health Router - Liveness probe
"""

from fastapi import APIRouter
from typing import Dict

router = APIRouter()


@router.get("/health")
def health_check() -> Dict[str, str]:
    """Liveness probe. Does not touch TMDB or the database."""
    return {"status": "OK", "message": "Movie API is running"}
