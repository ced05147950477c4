"""Map data delivery services."""

from .cache import MapResultCache, make_cache_key
from .clustering import cluster_points
from .level_of_detail import (
    describe_zoom_policy,
    level_of_detail_filter,
    limit_for_zoom,
    proximity_threshold_km,
)
from .service import MapService, get_map_service
from .viewport import query_viewport, select_candidates

__all__ = [
    "MapResultCache",
    "MapService",
    "cluster_points",
    "describe_zoom_policy",
    "get_map_service",
    "level_of_detail_filter",
    "limit_for_zoom",
    "make_cache_key",
    "proximity_threshold_km",
    "query_viewport",
    "select_candidates",
]
