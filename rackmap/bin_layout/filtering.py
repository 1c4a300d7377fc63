"""
Filtering, sorting and pagination for the flat bin table.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

from . import conf
from .records import Bin

logger = logging.getLogger(__name__)

ALL_AISLES = "ALL"
PAGE_WINDOW_WIDTH = 7


class _Choice(Enum):
    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown {cls.__name__} {value!r}, expected one of: {choices}")


class StatusFilter(_Choice):
    ALL = "all"
    OCCUPIED = "occupied"
    EMPTY = "empty"
    INACTIVE = "inactive"


class SortKey(_Choice):
    LABEL = "label"
    ROW = "row"
    SHELF = "shelf"
    POSITION = "position"
    STOCK = "stock"
    STATUS = "status"


class SortDirection(_Choice):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class BinQuery:
    search: str = ""
    aisle: str = ALL_AISLES
    status: StatusFilter = StatusFilter.ALL


@dataclass(frozen=True, slots=True)
class Page:
    items: Tuple[Bin, ...]
    page: int
    page_size: int
    total: int
    pages: int

    @property
    def first_item(self) -> int:
        """1-based index of the first row shown, 0 when there are none."""
        if not self.items:
            return 0
        return self.page * self.page_size + 1

    @property
    def last_item(self) -> int:
        if not self.items:
            return 0
        return self.page * self.page_size + len(self.items)

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages - 1


_STATUS_PREDICATES: Dict[StatusFilter, Callable[[Bin], bool]] = {
    StatusFilter.OCCUPIED: lambda b: b.stock_count > 0 and b.is_active,
    StatusFilter.EMPTY: lambda b: b.stock_count == 0 and b.is_active,
    StatusFilter.INACTIVE: lambda b: not b.is_active,
}

_SORT_KEYS: Dict[SortKey, Callable[[Bin], object]] = {
    SortKey.LABEL: lambda b: b.label or "",
    SortKey.ROW: lambda b: b.row or "",
    SortKey.SHELF: lambda b: b.shelf or "",
    SortKey.POSITION: lambda b: b.position or "",
    SortKey.STOCK: lambda b: b.stock_count or 0,
    SortKey.STATUS: lambda b: 1 if b.is_active else 0,
}


def filter_bins(bins: Sequence[Bin], query: BinQuery) -> Tuple[Bin, ...]:
    """
    Apply search text, aisle and status filters (all must match).

    Order of the input is kept.
    """
    status = StatusFilter.coerce(query.status)
    result = tuple(bins)

    if query.search.strip():
        needle = query.search.lower()
        result = tuple(b for b in result if needle in b.label.lower())

    if query.aisle != ALL_AISLES:
        result = tuple(b for b in result if b.row == query.aisle)

    predicate = _STATUS_PREDICATES.get(status)
    if predicate is not None:
        result = tuple(b for b in result if predicate(b))

    return result


def sort_bins(
    bins: Sequence[Bin],
    key=SortKey.LABEL,
    direction=SortDirection.ASC,
) -> Tuple[Bin, ...]:
    """Stable sort; ties keep their input order in both directions."""
    key = SortKey.coerce(key)
    direction = SortDirection.coerce(direction)
    return tuple(sorted(bins, key=_SORT_KEYS[key], reverse=direction is SortDirection.DESC))


def _check_page_size(page_size) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"Page size must be an integer >= 1, got {page_size!r}")
    return page_size


def paginate(bins: Sequence[Bin], page: int = 0, page_size: Optional[int] = None) -> Page:
    """
    Return one page of `bins`; `page` is 0-based.

    Out of range pages clamp to the first or last page instead of failing,
    so a page index kept across a filter change stays usable.
    """
    if page_size is None:
        page_size = conf.table_page_size()
    page_size = _check_page_size(page_size)
    if isinstance(page, bool) or not isinstance(page, int):
        raise ValueError(f"Page index must be an integer, got {page!r}")

    total = len(bins)
    pages = math.ceil(total / page_size)
    clamped = min(max(page, 0), max(pages - 1, 0))
    if clamped != page:
        logger.debug(f"Page {page} out of range (pages={pages}), using {clamped}")

    start = clamped * page_size
    return Page(
        items=tuple(bins[start:start + page_size]),
        page=clamped,
        page_size=page_size,
        total=total,
        pages=pages,
    )


def page_window(page: int, pages: int, width: int = PAGE_WINDOW_WIDTH) -> Tuple[int, ...]:
    """Page indexes for the numbered pager buttons, centred on `page` when possible."""
    if pages <= width:
        return tuple(range(pages))
    half = width // 2
    if page < half:
        start = 0
    elif page > pages - half - 1:
        start = pages - width
    else:
        start = page - half
    return tuple(range(start, start + width))


def next_sort(current_key, current_direction, clicked_key) -> Tuple[SortKey, SortDirection]:
    """Column header click: same column flips direction, new column starts ascending."""
    current_key = SortKey.coerce(current_key)
    current_direction = SortDirection.coerce(current_direction)
    clicked_key = SortKey.coerce(clicked_key)
    if clicked_key is current_key:
        flipped = SortDirection.DESC if current_direction is SortDirection.ASC else SortDirection.ASC
        return current_key, flipped
    return clicked_key, SortDirection.ASC


def query_table(
    bins: Sequence[Bin],
    query: Optional[BinQuery] = None,
    key=SortKey.LABEL,
    direction=SortDirection.ASC,
    page: int = 0,
    page_size: Optional[int] = None,
) -> Page:
    """Filter, sort and paginate in one go for the table view."""
    filtered = filter_bins(bins, query or BinQuery())
    return paginate(sort_bins(filtered, key, direction), page, page_size)
