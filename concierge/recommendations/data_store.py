from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd
from pydantic import ValidationError

from ..config import DEFAULT_CATALOG_CONFIG
from .models import DietaryOption, GeoPoint, RestaurantRecord

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "id",
    "name",
    "address",
    "lat",
    "lng",
    "rating",
    "price_level",
    "cuisines",
    "dietary_options",
    "popular_dishes",
    "features",
]

_PRICE_BUCKETS = {"$": 1, "$$": 2, "$$$": 3, "$$$$": 4}


def _is_missing(value: Any) -> bool:
    return value is None or bool(pd.isna(value))


def _required(row: pd.Series, column: str) -> str:
    value = row.get(column)
    if _is_missing(value) or not str(value).strip():
        raise ValueError(f"missing required column {column!r}")
    return str(value).strip()


def _split_list(value: Any) -> list[str]:
    if _is_missing(value):
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]


def _normalize_rating(rating: Any) -> float:
    if _is_missing(rating):
        return 0.0
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, min(5.0, value))


def _map_price_level(value: Any) -> int:
    """Accept either a numeric tier or a ``$``..``$$$$`` bucket."""
    raw = str(value).strip()
    if raw in _PRICE_BUCKETS:
        return _PRICE_BUCKETS[raw]
    return int(float(raw))


def _parse_dietary_options(value: Any) -> list[DietaryOption]:
    """
    Parse ``tag`` or ``tag:yes|no`` entries.

    A bare tag is an available accommodation; ``tag:no`` records an explicit
    unavailable entry.
    """
    options: list[DietaryOption] = []
    for entry in _split_list(value):
        tag, _, flag = entry.partition(":")
        available = flag.strip().lower() not in ("no", "false", "0")
        options.append(DietaryOption(tag=tag, available=available))
    return options


def _row_to_record(row: pd.Series) -> RestaurantRecord:
    lat = row.get("lat")
    lng = row.get("lng")
    return RestaurantRecord(
        id=_required(row, "id"),
        name=_required(row, "name"),
        address="" if _is_missing(row.get("address")) else str(row.get("address")),
        location=GeoPoint(
            lat=0.0 if _is_missing(lat) else float(lat),
            lng=0.0 if _is_missing(lng) else float(lng),
        ),
        rating=_normalize_rating(row.get("rating")),
        price_level=_map_price_level(row.get("price_level")),
        cuisines=_split_list(row.get("cuisines")),
        dietary_options=_parse_dietary_options(row.get("dietary_options")),
        popular_dishes=_split_list(row.get("popular_dishes")),
        features=_split_list(row.get("features")),
    )


def frame_to_records(df: pd.DataFrame) -> list[RestaurantRecord]:
    """Convert catalog rows into records, skipping rows that fail validation."""
    df = df.copy()
    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    records: list[RestaurantRecord] = []
    for index, row in df.iterrows():
        try:
            records.append(_row_to_record(row))
        except (ValidationError, ValueError, TypeError):
            logger.warning("Skipping malformed catalog row %s", index, exc_info=True)
    return records


def load_catalog(path: Path | str | None = None) -> list[RestaurantRecord]:
    """Read a flat CSV catalog export into a read-only list of records."""
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_CONFIG.catalog_path
    if not catalog_path.is_file():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    df = pd.read_csv(catalog_path, dtype={"id": str, "price_level": str})
    records = frame_to_records(df)
    logger.info("Loaded %d restaurants from %s", len(records), catalog_path)
    return records
