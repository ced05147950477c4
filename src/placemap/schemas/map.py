"""Pydantic request/response models for map endpoints."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import Bounds, Cluster, MapFeature, MapPoint


class BoundsModel(BaseModel):
    north: Optional[float] = None
    south: Optional[float] = None
    east: Optional[float] = None
    west: Optional[float] = None

    def to_bounds(self) -> Optional[Bounds]:
        return Bounds.from_mapping(self.model_dump())


class MapPlacesRequest(BaseModel):
    bounds: Optional[BoundsModel] = Field(default=None, description="Visible map area; omit for no spatial filter.")
    zoom: Optional[float] = Field(default=None, description="Map zoom level; fractional values are truncated.")


class MapPointModel(BaseModel):
    id: str
    placeId: Optional[str] = None
    name: str
    address: Optional[str] = None
    latitude: float
    longitude: float
    category: Optional[str] = None
    businessStatus: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_point(cls, point: MapPoint) -> "MapPointModel":
        return cls(
            id=point.id,
            placeId=point.place_id,
            name=point.name,
            address=point.address,
            latitude=point.latitude,
            longitude=point.longitude,
            category=point.category,
            businessStatus=point.business_status,
            description=point.description,
        )


class ClusterModel(BaseModel):
    id: str
    isCluster: Literal[True] = True
    count: int
    categories: List[Optional[str]]
    primaryCategory: Optional[str] = None
    latitude: float
    longitude: float
    memberPoints: List[MapPointModel]

    @classmethod
    def from_cluster(cls, cluster: Cluster) -> "ClusterModel":
        return cls(
            id=cluster.cluster_id,
            count=cluster.count,
            categories=list(cluster.categories),
            primaryCategory=cluster.primary_category,
            latitude=cluster.latitude,
            longitude=cluster.longitude,
            memberPoints=[MapPointModel.from_point(member) for member in cluster.members],
        )


MapFeatureModel = Union[ClusterModel, MapPointModel]


def to_feature_model(feature: MapFeature) -> MapFeatureModel:
    if isinstance(feature, Cluster):
        return ClusterModel.from_cluster(feature)
    return MapPointModel.from_point(feature)


class ZoomPolicyModel(BaseModel):
    zoom: int
    levelOfDetail: str
    limit: int
    clustered: bool
    proximityThresholdKm: Optional[float] = None


class CategoryModel(BaseModel):
    code: str
    label: str


class CacheStatsModel(BaseModel):
    enabled: bool
    size: int | None = None
    maxsize: int | None = None
    ttlSeconds: float | None = None
    hits: int | None = None
    misses: int | None = None
