"""Map data endpoints."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.places_repository import PlaceStoreError, clear_places_cache
from ...models.categories import PLACE_CATEGORIES
from ...models.domain import Bounds
from ...schemas.map import (
    CacheStatsModel,
    CategoryModel,
    MapFeatureModel,
    MapPlacesRequest,
    ZoomPolicyModel,
    to_feature_model,
)
from ...services.map.level_of_detail import describe_zoom_policy
from ...services.map.service import MapService, get_map_service

router = APIRouter(prefix="/map", tags=["map"])


def _effective_zoom(zoom: Optional[float]) -> int:
    if zoom is None or not math.isfinite(zoom):
        return settings.map_default_zoom
    # fractional zoom levels truncate toward zero
    return int(zoom)


def _map_service() -> MapService:
    try:
        return get_map_service()
    except PlaceStoreError as exc:
        logging.error(f"Place store unavailable: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database error occurred: {exc}",
        ) from exc


def _serve_places(bounds: Optional[Bounds], zoom: Optional[float]) -> List[MapFeatureModel]:
    effective_zoom = _effective_zoom(zoom)
    try:
        features = get_map_service().get_places(bounds, effective_zoom)
    except PlaceStoreError as exc:
        logging.error(f"Place store unavailable while serving map data: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database error occurred: {exc}",
        ) from exc
    except Exception as exc:
        logging.exception("Unexpected error while serving map data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while fetching places: {exc}",
        ) from exc
    return [to_feature_model(feature) for feature in features]


@router.get("/places", response_model=List[MapFeatureModel], status_code=status.HTTP_200_OK)
def get_map_places(
    north: float | None = Query(default=None, description="Northern edge latitude"),
    south: float | None = Query(default=None, description="Southern edge latitude"),
    east: float | None = Query(default=None, description="Eastern edge longitude"),
    west: float | None = Query(default=None, description="Western edge longitude"),
    zoom: float | None = Query(default=None, description="Map zoom level (defaults to the configured zoom)"),
) -> List[MapFeatureModel]:
    """Places and clusters visible in the viewport."""
    bounds = Bounds.from_mapping({"north": north, "south": south, "east": east, "west": west})
    return _serve_places(bounds, zoom)


@router.post("/places", response_model=List[MapFeatureModel], status_code=status.HTTP_200_OK)
def post_map_places(payload: MapPlacesRequest) -> List[MapFeatureModel]:
    bounds = payload.bounds.to_bounds() if payload.bounds else None
    return _serve_places(bounds, payload.zoom)


@router.get("/zoom-policy", response_model=ZoomPolicyModel, status_code=status.HTTP_200_OK)
def get_zoom_policy(zoom: float | None = Query(default=None)) -> ZoomPolicyModel:
    return ZoomPolicyModel(**describe_zoom_policy(_effective_zoom(zoom)))


@router.get("/categories", response_model=List[CategoryModel], status_code=status.HTTP_200_OK)
def list_categories() -> List[CategoryModel]:
    return [CategoryModel(code=code, label=label) for code, label in PLACE_CATEGORIES.items()]


@router.get("/cache", response_model=CacheStatsModel, status_code=status.HTTP_200_OK)
def get_cache_stats() -> CacheStatsModel:
    return CacheStatsModel(**_map_service().cache_stats())


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
def clear_cache() -> None:
    _map_service().clear_cache()
    clear_places_cache()
    logging.info("Map response cache cleared")
