"""Segment Normalizer — wire segments → unique unit segments.

A wire drawn across several grid cells is split into length-1 pieces so
that every intermediate grid point becomes a graph vertex. Overlapping
wires collapse onto the same pieces.
"""

from __future__ import annotations

from collections.abc import Iterable

from circuitcheck.errors import InvalidSchematic
from circuitcheck.schemas.schematic import UnitSegment, WireSegment


def wire_length(wire: WireSegment) -> int:
    """Number of unit segments the wire spans."""
    if wire.is_vertical and wire.y1 != wire.y2:
        return abs(wire.y2 - wire.y1)
    if wire.y1 == wire.y2 and wire.x1 != wire.x2:
        return abs(wire.x2 - wire.x1)
    raise InvalidSchematic(
        f"Wire ({wire.x1},{wire.y1})-({wire.x2},{wire.y2}) is not axis-aligned"
    )


def split_wire(wire: WireSegment) -> list[UnitSegment]:
    """Expand one axis-aligned wire into its unit segments."""
    wire_length(wire)
    if wire.is_vertical:
        lo, hi = sorted((wire.y1, wire.y2))
        return [UnitSegment.between((wire.x1, y), (wire.x1, y + 1)) for y in range(lo, hi)]
    lo, hi = sorted((wire.x1, wire.x2))
    return [UnitSegment.between((x, wire.y1), (x + 1, wire.y1)) for x in range(lo, hi)]


def normalize_wires(
    wires: Iterable[WireSegment],
    max_segments: int | None = None,
) -> list[UnitSegment]:
    """Split every wire and drop duplicate unit segments (first seen wins).

    Raises:
        InvalidSchematic: the wires span more than ``max_segments`` unit
            segments in total (counted before deduplication).
    """
    wires = list(wires)
    if max_segments is not None:
        total = sum(wire_length(wire) for wire in wires)
        if total > max_segments:
            raise InvalidSchematic(
                f"Wires span {total} grid cells, more than the limit of {max_segments}"
            )

    unique: dict[str, UnitSegment] = {}
    for wire in wires:
        for segment in split_wire(wire):
            unique.setdefault(segment.key, segment)
    return list(unique.values())
