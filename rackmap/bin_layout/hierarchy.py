"""
Aisle → rack → shelf → position hierarchy for a zone's bins.

Everything here is a projection of the bin list: groups hold references to
the original Bin records and are rebuilt on every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from . import conf
from .labels import rack_key
from .records import Bin

logger = logging.getLogger(__name__)


class ShelfGroup(NamedTuple):
    shelf: str
    bins: Tuple[Bin, ...]


@dataclass(frozen=True, slots=True)
class AisleGroup:
    row: str
    shelves: Tuple[ShelfGroup, ...]
    rack_keys: Tuple[str, ...]

    @property
    def bins(self) -> Tuple[Bin, ...]:
        return tuple(b for group in self.shelves for b in group.bins)

    @property
    def has_multiple_racks(self) -> bool:
        return len(self.rack_keys) > 1


@dataclass(frozen=True, slots=True)
class RackGroup:
    row: str
    rack_key: Optional[str]
    shelves: Tuple[ShelfGroup, ...]

    @property
    def bins(self) -> Tuple[Bin, ...]:
        return tuple(b for group in self.shelves for b in group.bins)


@dataclass(frozen=True, slots=True)
class ZoneLayout:
    aisles: Tuple[AisleGroup, ...]
    ungrouped: Tuple[Bin, ...]

    def aisle(self, row: str) -> Optional[AisleGroup]:
        for group in self.aisles:
            if group.row == row:
                return group
        return None


@dataclass(frozen=True, slots=True)
class RackWindow:
    """Racks to draw for one aisle plus how many sit behind 'show more'."""
    visible: Tuple[RackGroup, ...]
    hidden_count: int

    @property
    def has_more(self) -> bool:
        return self.hidden_count > 0


def _position_key(b: Bin) -> str:
    return b.position if b.position is not None else ""


def _collect_rack_keys(bins: Iterable[Bin]) -> Tuple[str, ...]:
    keys = {rack_key(b.label) for b in bins}
    keys.discard(None)
    return tuple(sorted(keys))


def build_zone_layout(bins: Sequence[Bin]) -> ZoneLayout:
    """
    Group a zone's bins into aisles (by row) and shelves.

    Bins without both row and shelf land in `ungrouped`, in input order.
    Aisles sort ascending, shelves descending (top shelf first) and bins
    within a shelf by position as plain strings.
    """
    ungrouped: List[Bin] = []
    by_row: Dict[str, Dict[str, List[Bin]]] = {}

    for b in bins:
        if not b.is_grouped:
            ungrouped.append(b)
            continue
        by_row.setdefault(b.row, {}).setdefault(b.shelf, []).append(b)

    aisles = []
    for row in sorted(by_row):
        shelves = by_row[row]
        shelf_groups = tuple(
            # sorted() is stable, equal positions keep input order
            ShelfGroup(shelf, tuple(sorted(shelves[shelf], key=_position_key)))
            for shelf in sorted(shelves, reverse=True)
        )
        aisle_bins = [b for group in shelf_groups for b in group.bins]
        aisles.append(AisleGroup(row=row, shelves=shelf_groups, rack_keys=_collect_rack_keys(aisle_bins)))

    logger.debug(
        f"Zone layout: {len(aisles)} aisles, "
        f"{len(bins) - len(ungrouped)} grouped bins, {len(ungrouped)} ungrouped"
    )
    return ZoneLayout(aisles=tuple(aisles), ungrouped=tuple(ungrouped))


def rack_group(aisle: AisleGroup, key: Optional[str]) -> Optional[RackGroup]:
    """
    Bins of `aisle` whose label rack token equals `key`, shelf order kept.

    Shelves left empty are dropped; None is returned when nothing matches.
    """
    shelves = []
    for group in aisle.shelves:
        matching = tuple(b for b in group.bins if rack_key(b.label) == key)
        if matching:
            shelves.append(ShelfGroup(group.shelf, matching))
    if not shelves:
        return None
    return RackGroup(row=aisle.row, rack_key=key, shelves=tuple(shelves))


def split_racks(aisle: AisleGroup) -> Tuple[RackGroup, ...]:
    if not aisle.has_multiple_racks:
        only_key = aisle.rack_keys[0] if aisle.rack_keys else None
        return (RackGroup(row=aisle.row, rack_key=only_key, shelves=aisle.shelves),)

    racks = []
    for key in aisle.rack_keys:
        group = rack_group(aisle, key)
        if group is not None:
            racks.append(group)
    # labels too short for a rack token still need somewhere to render
    leftovers = rack_group(aisle, None)
    if leftovers is not None:
        racks.append(leftovers)
    return tuple(racks)


def limit_racks(
    racks: Sequence[RackGroup],
    limit: Optional[int] = None,
    *,
    expanded: bool = False,
) -> RackWindow:
    """Cut `racks` down to `limit` unless the aisle was expanded."""
    if limit is None:
        limit = conf.rack_display_limit()
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"Rack display limit must be an integer >= 1, got {limit!r}")

    racks = tuple(racks)
    if expanded or len(racks) <= limit:
        return RackWindow(visible=racks, hidden_count=0)
    return RackWindow(visible=racks[:limit], hidden_count=len(racks) - limit)


def aisle_options(bins: Iterable[Bin]) -> Tuple[str, ...]:
    """Distinct aisle (row) values for the aisle filter, sorted."""
    return tuple(sorted({b.row for b in bins if b.row}))
