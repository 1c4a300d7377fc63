"""
Plain dict payloads for the grid and table views.
"""

from __future__ import annotations

from typing import Collection, Optional

from .filtering import Page, page_window
from .hierarchy import ZoneLayout, limit_racks, split_racks
from .labels import describe_label
from .metrics import bin_status, summarize_aisle
from .records import ZoneType


def serialize_bin(b):
    status = bin_status(b)
    return {
        'id': b.id,
        'label': b.label,
        'description': describe_label(b.label),
        'row': b.row,
        'shelf': b.shelf,
        'position': b.position,
        'capacity': b.capacity,
        'stockCount': b.stock_count,
        'isActive': b.is_active,
        'isEmpty': status.is_empty,
        'isOverCapacity': status.is_over_capacity,
        'fillPct': status.fill_pct,
    }


def _serialize_shelves(shelves):
    return [
        {'shelf': group.shelf, 'bins': [serialize_bin(b) for b in group.bins]}
        for group in shelves
    ]


def _serialize_rack(rack):
    return {
        'rackKey': rack.rack_key,
        'shelves': _serialize_shelves(rack.shelves),
    }


def _serialize_aisle(aisle, rack_limit, expanded):
    window = limit_racks(split_racks(aisle), rack_limit, expanded=expanded)
    return {
        'row': aisle.row,
        'rackKeys': list(aisle.rack_keys),
        'stats': summarize_aisle(aisle).as_dict(),
        'racks': [_serialize_rack(rack) for rack in window.visible],
        'hiddenRacks': window.hidden_count,
    }


def serialize_grid(
    layout: ZoneLayout,
    *,
    zone_type=ZoneType.STORAGE,
    rack_limit: Optional[int] = None,
    expanded_aisles: Collection[str] = (),
):
    """
    Grid payload for a zone. `expanded_aisles` lists the rows whose
    'show more racks' toggle is on.
    """
    zone_type = ZoneType.coerce(zone_type)
    return {
        'zoneType': zone_type.value,
        'color': zone_type.color,
        'aisles': [
            _serialize_aisle(aisle, rack_limit, aisle.row in expanded_aisles)
            for aisle in layout.aisles
        ],
        'ungrouped': [serialize_bin(b) for b in layout.ungrouped],
    }


def serialize_table(page: Page):
    return {
        'items': [serialize_bin(b) for b in page.items],
        'page': page.page,
        'pageSize': page.page_size,
        'pages': page.pages,
        'total': page.total,
        'showing': {'from': page.first_item, 'to': page.last_item},
        'pageWindow': list(page_window(page.page, page.pages)),
        'hasPrevious': page.has_previous,
        'hasNext': page.has_next,
    }
