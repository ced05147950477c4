"""Greedy proximity clustering of map points."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Cluster, MapFeature, MapPoint
from ..geospatial import haversine_km
from .level_of_detail import clustering_enabled, proximity_threshold_km


def cluster_points(points: Sequence[MapPoint], zoom: int) -> list[MapFeature]:
    """Merge points lying within the zoom's proximity radius of a seed point.

    The scan is a single greedy pass in input order. Each group is seeded by the
    first unprocessed point and anchored on that point's coordinates. Groups of
    one are emitted as the bare point. At zoom 18 and above points pass through
    unchanged.
    """
    if not points:
        return []
    if not clustering_enabled(zoom):
        return list(points)

    threshold = proximity_threshold_km(zoom)
    processed = [False] * len(points)
    features: list[MapFeature] = []

    for i, seed in enumerate(points):
        if processed[i]:
            continue
        processed[i] = True
        group = [seed]
        for j, other in enumerate(points):
            if processed[j]:
                continue
            distance = haversine_km(seed.latitude, seed.longitude, other.latitude, other.longitude)
            if distance <= threshold:
                group.append(other)
                processed[j] = True

        if len(group) == 1:
            features.append(seed)
            continue

        categories: list = []
        for member in group:
            if member.category not in categories:
                categories.append(member.category)
        features.append(
            Cluster(
                cluster_id=f"cluster-{i}",
                count=len(group),
                categories=tuple(categories),
                primary_category=seed.category,
                latitude=seed.latitude,
                longitude=seed.longitude,
                members=tuple(group),
            )
        )
    return features
