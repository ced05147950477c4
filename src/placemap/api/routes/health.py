"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...data.places_repository import PlaceStoreError

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_place_store():
    """Lazy import to avoid startup failures."""
    from ...services.map.service import get_map_service

    return get_map_service().store


@router.get("/health/places", status_code=status.HTTP_200_OK)
def check_place_store() -> dict:
    """Check that the place store can be read and report how many current places it holds."""
    backend = settings.place_store
    try:
        store = _get_place_store()
        backend = store.describe() if hasattr(store, "describe") else type(store).__name__
        places = store.current_places()
    except PlaceStoreError as exc:
        return {
            "backend": backend,
            "healthy": False,
            "error": str(exc),
            "supabase_configured": settings.supabase_configured,
        }
    return {
        "backend": backend,
        "healthy": True,
        "current_places": len(places),
        "supabase_configured": settings.supabase_configured,
    }
