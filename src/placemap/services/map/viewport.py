"""Viewport query: select the bounded, ordered and capped candidate places for a map view."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...data.places_repository import PlaceStore
from ...models.domain import Bounds, MapPoint, Place
from ..geospatial import parse_coordinate
from .level_of_detail import level_of_detail_filter, limit_for_zoom


def to_map_point(place: Place, latitude: float, longitude: float) -> MapPoint:
    return MapPoint(
        id=place.id,
        place_id=place.place_id,
        name=place.name,
        address=place.address,
        latitude=latitude,
        longitude=longitude,
        category=place.category,
        business_status=place.business_status,
        description=place.description,
    )


def select_candidates(
    places: Iterable[Place],
    bounds: Optional[Bounds],
    zoom: int,
) -> list[MapPoint]:
    """Filter, order and cap places for ``zoom``.

    Records whose coordinates cannot be parsed to finite numbers are skipped.
    """
    limit = limit_for_zoom(zoom)
    if limit <= 0:
        return []

    predicate = level_of_detail_filter(zoom)
    candidates: list[MapPoint] = []
    skipped = 0
    for place in places:
        latitude = parse_coordinate(place.latitude)
        longitude = parse_coordinate(place.longitude)
        if latitude is None or longitude is None:
            skipped += 1
            logging.warning(
                f"Skipping place {place.id!r} ({place.name}) with invalid coordinates: "
                f"({place.latitude!r}, {place.longitude!r})"
            )
            continue
        if bounds is not None and not bounds.contains(latitude, longitude):
            continue
        if not predicate(place.category, place.business_status):
            continue
        candidates.append(to_map_point(place, latitude, longitude))

    # names compare case-insensitively, ties keep store order
    candidates.sort(key=lambda point: (point.category or "", (point.name or "").casefold()))
    if skipped:
        logging.info(f"Viewport query skipped {skipped} places with malformed coordinates")
    return candidates[:limit]


def query_viewport(store: PlaceStore, bounds: Optional[Bounds], zoom: int) -> list[MapPoint]:
    """Read current places from ``store`` and select the candidates for the viewport."""
    if limit_for_zoom(zoom) <= 0:
        logging.debug(f"Zoom {zoom} is below the point display threshold, skipping place store")
        return []
    places = store.current_places()
    candidates = select_candidates(places, bounds, zoom)
    logging.debug(f"Viewport query at zoom {zoom}: {len(candidates)} candidates from {len(places)} places")
    return candidates
