"""Map data delivery pipeline: cache, viewport query and clustering."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from ...config import settings
from ...data.places_repository import PlaceStore, get_place_store
from ...models.domain import Bounds, MapFeature
from .cache import MapResultCache, make_cache_key
from .clustering import cluster_points
from .viewport import query_viewport


class MapService:
    """Serve map features for a viewport, memoizing responses when a cache is given."""

    def __init__(self, store: PlaceStore, cache: Optional[MapResultCache] = None) -> None:
        self.store = store
        self.cache = cache

    def get_places(self, bounds: Optional[Bounds], zoom: int) -> tuple[MapFeature, ...]:
        key = make_cache_key(zoom, bounds)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logging.debug(f"Map cache hit for {key}")
                return cached
            logging.debug(f"Map cache miss for {key}")

        features = self.build_features(bounds, zoom)
        if self.cache is not None:
            self.cache.set(key, features)
        return features

    def build_features(self, bounds: Optional[Bounds], zoom: int) -> tuple[MapFeature, ...]:
        candidates = query_viewport(self.store, bounds, zoom)
        features = tuple(cluster_points(candidates, zoom))
        logging.debug(f"Built {len(features)} map features from {len(candidates)} candidates at zoom {zoom}")
        return features

    def cache_stats(self) -> dict:
        if self.cache is None:
            return {"enabled": False}
        return {"enabled": True, **self.cache.stats()}

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()


@lru_cache(maxsize=1)
def get_map_service() -> MapService:
    """Process-wide map service built from settings."""
    cache = None
    if settings.map_cache_enabled:
        cache = MapResultCache(
            ttl_seconds=settings.map_cache_ttl_seconds,
            max_entries=settings.map_cache_max_entries,
        )
    return MapService(get_place_store(), cache=cache)
