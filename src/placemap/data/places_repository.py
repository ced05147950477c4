"""Read-only access to current place records from a CSV export or Supabase."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import Place

PLACE_COLUMNS: tuple[str, ...] = (
    "id",
    "placeId",
    "placeName",
    "placeAddress",
    "placeDistrict",
    "placeLatitude",
    "placeLongitude",
    "placeCategory",
    "placeBusinessStatus",
    "description",
    "isCurrent",
)

_FALSE_VALUES = {"0", "false", "f", "no", "n"}


class PlaceStoreError(RuntimeError):
    """Raised when the place store cannot be read."""


class PlaceStore(Protocol):
    """Anything able to return the current (non-historical) place records."""

    def current_places(self) -> Sequence[Place]:
        ...


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _is_current(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return True
    return text not in _FALSE_VALUES


def place_from_row(row: Mapping[str, Any]) -> Place:
    """Map a registry row (CSV or database) onto a Place."""
    category = _clean(row.get("placeCategory"))
    return Place(
        id=str(row.get("id") or row.get("placeId") or "").strip(),
        place_id=_clean(row.get("placeId")),
        name=(_clean(row.get("placeName")) or ""),
        address=_clean(row.get("placeAddress")),
        district=_clean(row.get("placeDistrict")),
        latitude=row.get("placeLatitude"),
        longitude=row.get("placeLongitude"),
        category=category.upper() if category else None,
        business_status=_clean(row.get("placeBusinessStatus")),
        description=_clean(row.get("description")),
        is_current=_is_current(row.get("isCurrent")),
    )


@functools.lru_cache(maxsize=4)
def _load_csv(path: Path, modified_ns: int) -> tuple[Place, ...]:
    places: list[Place] = []
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise PlaceStoreError(f"Places file '{path}' is missing a header row.")
        for row in reader:
            place = place_from_row(row)
            if place.is_current:
                places.append(place)
    logging.info(f"Loaded {len(places)} current places from {path.name}")
    return tuple(places)


class CsvPlaceStore:
    """Place store backed by a CSV export of the registry table."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path or settings.places_file)

    def current_places(self) -> Sequence[Place]:
        try:
            modified_ns = self.path.stat().st_mtime_ns
        except OSError as exc:
            raise PlaceStoreError(f"Places file not found: {self.path}") from exc
        try:
            return _load_csv(self.path, modified_ns)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise PlaceStoreError(f"Unable to read places file '{self.path}': {exc}") from exc

    def describe(self) -> str:
        return f"csv:{self.path}"


class SupabasePlaceStore:
    """Place store backed by the Supabase ``places`` table."""

    def __init__(self, client: Any, table: str | None = None, page_size: int | None = None) -> None:
        self.client = client
        self.table = table or settings.supabase_places_table
        self.page_size = page_size or settings.supabase_page_size

    def current_places(self) -> Sequence[Place]:
        places: list[Place] = []
        start = 0
        try:
            while True:
                response = (
                    self.client.table(self.table)
                    .select(",".join(PLACE_COLUMNS))
                    .eq("isCurrent", True)
                    .order("id")
                    .range(start, start + self.page_size - 1)
                    .execute()
                )
                rows = response.data or []
                places.extend(place_from_row(row) for row in rows)
                if len(rows) < self.page_size:
                    break
                start += self.page_size
        except Exception as exc:
            logging.error(f"Failed to load places from Supabase table '{self.table}': {exc}")
            raise PlaceStoreError(f"Failed to load places from '{self.table}': {exc}") from exc
        return tuple(places)

    def describe(self) -> str:
        return f"supabase:{self.table}"


def get_place_store() -> PlaceStore:
    """Select the place store backend from settings."""
    backend = settings.place_store
    if backend == "supabase" or (backend == "auto" and settings.supabase_configured):
        client = get_supabase_client()
        if client is None:
            logging.error(f"Supabase place store selected ({backend}) but no client could be created")
            raise PlaceStoreError("Supabase place store requested but the client is not configured.")
        return SupabasePlaceStore(client)
    return CsvPlaceStore(settings.places_file)


def clear_places_cache() -> None:
    """Drop memoized CSV contents."""
    _load_csv.cache_clear()
