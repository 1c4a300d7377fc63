"""
Occupancy, capacity and utilization figures for bins, aisles, zones and
whole warehouses.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Tuple

from .hierarchy import AisleGroup
from .records import Bin, Warehouse, Zone


@dataclass(frozen=True, slots=True)
class BinStatus:
    is_empty: bool
    is_over_capacity: bool
    is_inactive: bool
    fill_pct: Optional[int] = None


@dataclass(frozen=True, slots=True)
class OccupancyStats:
    total_bins: int = 0
    occupied_bins: int = 0
    empty_bins: int = 0
    inactive_bins: int = 0
    over_capacity_bins: int = 0
    total_items: int = 0
    utilization_pct: int = 0

    def as_dict(self):
        return {
            "totalBins": self.total_bins,
            "occupiedBins": self.occupied_bins,
            "emptyBins": self.empty_bins,
            "inactiveBins": self.inactive_bins,
            "overCapacityBins": self.over_capacity_bins,
            "totalItems": self.total_items,
            "utilizationPct": self.utilization_pct,
        }


def percent_of(value: int, total: int) -> int:
    """Whole percent of `value` in `total`, halves rounded up; 0 if total is 0."""
    if total <= 0:
        return 0
    ratio = Decimal(value) * 100 / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def has_capacity_limit(b: Bin) -> bool:
    return b.capacity is not None and b.capacity > 0


def is_over_capacity(b: Bin) -> bool:
    return has_capacity_limit(b) and b.stock_count > b.capacity


def bin_status(b: Bin) -> BinStatus:
    return BinStatus(
        is_empty=b.stock_count == 0,
        is_over_capacity=is_over_capacity(b),
        is_inactive=not b.is_active,
        fill_pct=percent_of(b.stock_count, b.capacity) if has_capacity_limit(b) else None,
    )


def summarize_bins(bins: Iterable[Bin]) -> OccupancyStats:
    """Headline stats; callers pass the unfiltered bin list."""
    total = occupied = empty = inactive = over = items = 0
    for b in bins:
        total += 1
        items += b.stock_count
        if b.stock_count > 0:
            occupied += 1
        elif b.is_active:
            empty += 1
        if not b.is_active:
            inactive += 1
        if is_over_capacity(b):
            over += 1

    return OccupancyStats(
        total_bins=total,
        occupied_bins=occupied,
        empty_bins=empty,
        inactive_bins=inactive,
        over_capacity_bins=over,
        total_items=items,
        utilization_pct=percent_of(occupied, total),
    )


def summarize_aisle(aisle: AisleGroup) -> OccupancyStats:
    return summarize_bins(aisle.bins)


def summarize_zone(zone: Zone) -> OccupancyStats:
    return summarize_bins(zone.bins)


def summarize_warehouse(warehouses: Iterable[Warehouse]) -> OccupancyStats:
    """
    Totals across every zone of every warehouse.

    Unlike zone stats, empty here means simply "not occupied", inactive
    bins included.
    """
    stats = summarize_bins(
        b for warehouse in warehouses for zone in warehouse.zones for b in zone.bins
    )
    return OccupancyStats(
        total_bins=stats.total_bins,
        occupied_bins=stats.occupied_bins,
        empty_bins=stats.total_bins - stats.occupied_bins,
        inactive_bins=stats.inactive_bins,
        over_capacity_bins=stats.over_capacity_bins,
        total_items=stats.total_items,
        utilization_pct=stats.utilization_pct,
    )


def utilization_segments(stats: OccupancyStats) -> Tuple[Tuple[str, int], ...]:
    """
    Segments of a utilization bar; values add up to total_bins.

    Zero-value segments are kept, the renderer skips them.
    """
    inactive_empty = stats.total_bins - stats.occupied_bins - stats.empty_bins
    return (
        ("occupied", stats.occupied_bins),
        ("empty", stats.empty_bins),
        ("inactive", inactive_empty),
    )
