"""Connectivity Graph Builder and Node-Group Merger.

Unit segments become undirected edges between node identifiers; a BFS
flood fill then merges everything joined by ideal wire into electrical
node-groups.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from circuitcheck.schemas.schematic import UnitSegment
from circuitcheck.topology.terminals import Side, TerminalResolver

Adjacency = dict[str, list[str]]


# ─── Graph Builder ───


def _segment_ends(
    segment: UnitSegment, resolver: TerminalResolver
) -> tuple[str | None, str | None]:
    """Resolve both ends of a unit segment from the sides facing each other."""
    if segment.is_horizontal:
        return (
            resolver.resolve(segment.x1, segment.y1, Side.RIGHT),
            resolver.resolve(segment.x2, segment.y2, Side.LEFT),
        )
    return (
        resolver.resolve(segment.x1, segment.y1, Side.BOTTOM),
        resolver.resolve(segment.x2, segment.y2, Side.TOP),
    )


def build_connectivity_graph(
    segments: Iterable[UnitSegment],
    resolver: TerminalResolver,
) -> Adjacency:
    """Build the undirected adjacency lists; parallel edges are kept."""
    adjacency: Adjacency = {}
    for segment in segments:
        u, v = _segment_ends(segment, resolver)
        if u is None or v is None:
            continue
        adjacency.setdefault(u, []).append(v)
        adjacency.setdefault(v, []).append(u)
    return adjacency


# ─── Node-Group Merger ───


class NodeGroups:
    """Connectivity classes of node identifiers for one analysis call.

    ``group_of`` is total: an identifier absent from the graph (an
    unwired terminal) gets its own singleton group the first time it is
    asked for, and keeps it afterwards.
    """

    def __init__(self, adjacency: Adjacency):
        self._group: dict[str, int] = {}
        self._next_id = 0

        for start in adjacency:
            if start in self._group:
                continue
            group = self._new_group()
            self._group[start] = group
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for neighbour in adjacency.get(current, ()):
                    if neighbour not in self._group:
                        self._group[neighbour] = group
                        queue.append(neighbour)

        self.connected_count = self._next_id

    def _new_group(self) -> int:
        self._next_id += 1
        return self._next_id

    def group_of(self, node_id: str) -> int:
        group = self._group.get(node_id)
        if group is None:
            group = self._new_group()
            self._group[node_id] = group
        return group

    def __len__(self) -> int:
        return self._next_id
