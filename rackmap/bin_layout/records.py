"""
Read-only records for bins, zones and warehouses.

Records are built from payloads that were already fetched and deserialized
elsewhere. Nothing here touches the database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class ZoneType(Enum):
    """Functional purpose of a zone. Affects presentation only."""
    RECEIVING = "RECEIVING"
    STORAGE = "STORAGE"
    PICKING = "PICKING"
    PACKING = "PACKING"
    SHIPPING = "SHIPPING"
    RETURNS = "RETURNS"

    @classmethod
    def coerce(cls, value) -> "ZoneType":
        """Unknown or missing types render as storage."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            return cls.STORAGE

    @property
    def hint(self) -> str:
        return ZONE_TYPE_HINTS[self]

    @property
    def color(self) -> str:
        return ZONE_TYPE_COLORS[self]


ZONE_TYPE_HINTS = {
    ZoneType.STORAGE: "Main area where products live on shelves",
    ZoneType.PICKING: "Where workers grab items to fulfill orders",
    ZoneType.RECEIVING: "Where incoming deliveries are unloaded",
    ZoneType.PACKING: "Where picked items get boxed for shipping",
    ZoneType.SHIPPING: "Packed orders waiting for carrier pickup",
    ZoneType.RETURNS: "Where returned items are inspected and sorted",
}

ZONE_TYPE_COLORS = {
    ZoneType.STORAGE: "#3b82f6",
    ZoneType.PICKING: "#8b5cf6",
    ZoneType.RECEIVING: "#f59e0b",
    ZoneType.PACKING: "#f97316",
    ZoneType.SHIPPING: "#10b981",
    ZoneType.RETURNS: "#ef4444",
}

BIN_SIZES = ("SMALL", "MEDIUM", "LARGE", "XLARGE")


@dataclass(frozen=True, slots=True)
class Bin:
    """A single addressable storage location."""
    id: Any
    label: str
    row: Optional[str] = None
    shelf: Optional[str] = None
    position: Optional[str] = None
    capacity: Optional[int] = None
    is_active: bool = True
    stock_count: int = 0
    zone_id: Any = None
    size: Optional[str] = None
    pickable: bool = True
    sellable: bool = True

    @property
    def is_grouped(self) -> bool:
        # empty strings count as missing, same as the payload reader
        return bool(self.row) and bool(self.shelf)


@dataclass(frozen=True, slots=True)
class Zone:
    id: Any
    name: str
    type: ZoneType = ZoneType.STORAGE
    description: Optional[str] = None
    bins: Tuple[Bin, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Warehouse:
    id: Any
    name: str
    zones: Tuple[Zone, ...] = field(default_factory=tuple)


def _optional_str(value) -> Optional[str]:
    # the API sends '' for cleared fields
    if value is None:
        return None
    value = str(value)
    return value or None


def _non_negative_int(value, *, field_name: str, bin_id) -> int:
    if value is None:
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Bin {bin_id}: ignoring non-numeric {field_name} {value!r}")
        return 0
    if number != value:
        logger.warning(f"Bin {bin_id}: {field_name} {value!r} coerced to {number}")
    return max(number, 0)


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _flag(value, *, default: bool, field_name: str, bin_id) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    logger.warning(f"Bin {bin_id}: unreadable {field_name} {value!r}, using {default}")
    return default


def bin_from_mapping(data: Mapping[str, Any]) -> Bin:
    """
    Build a Bin from one deserialized API record (camelCase keys).

    Raises ValueError when `id` or `label` is missing.
    """
    if data.get("id") is None:
        raise ValueError(f"Bin record has no id: {dict(data)!r}")
    if data.get("label") is None:
        raise ValueError(f"Bin {data['id']} has no label")

    bin_id = data["id"]
    capacity = data.get("capacity")
    if capacity is not None:
        capacity = _non_negative_int(capacity, field_name="capacity", bin_id=bin_id)

    return Bin(
        id=bin_id,
        label=str(data["label"]),
        row=_optional_str(data.get("row")),
        shelf=_optional_str(data.get("shelf")),
        position=_optional_str(data.get("position")),
        capacity=capacity,
        is_active=_flag(data.get("isActive"), default=True, field_name="isActive", bin_id=bin_id),
        stock_count=_non_negative_int(
            data.get("_stockCount", data.get("stockCount")),
            field_name="stock count",
            bin_id=bin_id,
        ),
        zone_id=data.get("zoneId"),
        size=_optional_str(data.get("size")),
        pickable=_flag(data.get("pickable"), default=True, field_name="pickable", bin_id=bin_id),
        sellable=_flag(data.get("sellable"), default=True, field_name="sellable", bin_id=bin_id),
    )


def bins_from_payload(records: Iterable[Mapping[str, Any]]) -> Tuple[Bin, ...]:
    return tuple(bin_from_mapping(record) for record in records)


def zone_from_mapping(data: Mapping[str, Any]) -> Zone:
    return Zone(
        id=data.get("id"),
        name=str(data.get("name") or ""),
        type=ZoneType.coerce(data.get("type")),
        description=data.get("description"),
        bins=bins_from_payload(data.get("bins") or ()),
    )


def warehouse_from_mapping(data: Mapping[str, Any]) -> Warehouse:
    return Warehouse(
        id=data.get("id"),
        name=str(data.get("name") or ""),
        zones=tuple(zone_from_mapping(zone) for zone in data.get("zones") or ()),
    )


def with_stock_counts(bins: Iterable[Bin], counts: Mapping[Any, int]) -> Tuple[Bin, ...]:
    """
    Return copies of `bins` annotated with stock counts keyed by bin id.

    Bins missing from `counts` get 0. The input records are left untouched.
    """
    return tuple(
        replace(b, stock_count=_non_negative_int(counts.get(b.id), field_name="stock count", bin_id=b.id))
        for b in bins
    )
