"""Zoom-dependent display policy: level-of-detail bands, row caps and clustering radii."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ...models.categories import OPERATIONAL

LevelOfDetailPredicate = Callable[[Optional[str], Optional[str]], bool]

GOVERNMENT = frozenset({"O"})
PUBLIC_SERVICES = frozenset({"O", "P", "Q"})
CIVIC_AND_COMMERCE = frozenset({"O", "P", "Q", "J", "K", "L", "R"})
LOW_PRIORITY = frozenset({"T", "S"})

# (zoom <= key, radius km); first match wins.
PROXIMITY_THRESHOLDS_KM: tuple[tuple[int, float], ...] = (
    (6, 10.0),
    (8, 5.0),
    (10, 2.0),
    (12, 1.0),
    (14, 0.5),
    (16, 0.2),
    (18, 0.1),
)
MIN_PROXIMITY_THRESHOLD_KM = 0.1

# Points are returned unmerged from this zoom onwards.
NO_CLUSTERING_ZOOM = 18


@dataclass(frozen=True, slots=True)
class LevelOfDetailBand:
    label: str
    predicate: LevelOfDetailPredicate


def _government_only(category: Optional[str], business_status: Optional[str]) -> bool:
    return category in GOVERNMENT


def _public_services_or_operational(category: Optional[str], business_status: Optional[str]) -> bool:
    return category in PUBLIC_SERVICES or business_status == OPERATIONAL


def _civic_and_commerce(category: Optional[str], business_status: Optional[str]) -> bool:
    return category in CIVIC_AND_COMMERCE


def _all_but_low_priority(category: Optional[str], business_status: Optional[str]) -> bool:
    # A missing category never satisfies NOT IN, mirroring SQL null semantics.
    return (category is not None and category not in LOW_PRIORITY) or business_status is not None


def _everything(category: Optional[str], business_status: Optional[str]) -> bool:
    return True


def level_of_detail_band(zoom: int) -> LevelOfDetailBand:
    """Return the level-of-detail band active at ``zoom``."""
    if zoom < 8:
        return LevelOfDetailBand("region: government only", _government_only)
    if zoom < 10:
        return LevelOfDetailBand("city: government, education, health or operational", _public_services_or_operational)
    if zoom < 12:
        return LevelOfDetailBand("district: civic, finance, real estate and recreation", _civic_and_commerce)
    if zoom < 14:
        return LevelOfDetailBand("neighbourhood: all but household and other services unless status known", _all_but_low_priority)
    return LevelOfDetailBand("street: all places", _everything)


def level_of_detail_filter(zoom: int) -> LevelOfDetailPredicate:
    """Predicate over ``(category, business_status)`` for the given zoom level."""
    return level_of_detail_band(zoom).predicate


def limit_for_zoom(zoom: int) -> int:
    """Maximum number of candidate places returned for a zoom level."""
    if zoom < 10:
        return 0
    if zoom < 13:
        return 200
    if zoom <= 17:
        return 400
    return 800


def proximity_threshold_km(zoom: int) -> float:
    """Clustering radius for a zoom level, shrinking as the map zooms in."""
    for max_zoom, threshold in PROXIMITY_THRESHOLDS_KM:
        if zoom <= max_zoom:
            return threshold
    return MIN_PROXIMITY_THRESHOLD_KM


def clustering_enabled(zoom: int) -> bool:
    return zoom < NO_CLUSTERING_ZOOM


def describe_zoom_policy(zoom: int) -> dict:
    """Summarise the effective policy for a zoom level."""
    return {
        "zoom": zoom,
        "levelOfDetail": level_of_detail_band(zoom).label,
        "limit": limit_for_zoom(zoom),
        "clustered": clustering_enabled(zoom),
        "proximityThresholdKm": proximity_threshold_km(zoom) if clustering_enabled(zoom) else None,
    }
