"""
Bin label decomposition.

Labels are conventionally ``AISLE-RACK-SHELF-POSITION`` (e.g. ``A-02-03-01``)
but nothing upstream enforces it, so none of these helpers raise.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

LABEL_SEPARATOR = "-"


class LabelParts(NamedTuple):
    aisle: str
    rack: Optional[str]
    shelf: str
    position: str


def rack_key(label: Optional[str], *, separator: str = LABEL_SEPARATOR) -> Optional[str]:
    """Return the rack token (second token) of `label`, or None."""
    if not label:
        return None
    tokens = label.split(separator)
    if len(tokens) < 2:
        return None
    return tokens[1]


def split_label(label: Optional[str], *, separator: str = LABEL_SEPARATOR) -> Optional[LabelParts]:
    if not label:
        return None
    tokens = label.split(separator)
    if len(tokens) == 4:
        return LabelParts(*tokens)
    if len(tokens) == 3:
        # short form: no rack token
        aisle, shelf, position = tokens
        return LabelParts(aisle, None, shelf, position)
    return None


def describe_label(label: Optional[str], *, separator: str = LABEL_SEPARATOR) -> str:
    """Human readable breakdown used under the label on location sheets."""
    parts = split_label(label, separator=separator)
    if parts is None:
        return label or ""
    if parts.rack is None:
        return f"Row {parts.aisle} · Shelf {parts.shelf} · Pos {parts.position}"
    return (
        f"Aisle {parts.aisle} · Rack {parts.rack} · "
        f"Shelf {parts.shelf} · Pos {parts.position}"
    )
