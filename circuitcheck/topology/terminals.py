"""Terminal Resolver — grid coordinate + approach side → node identifier.

Only the two conducting faces of a component accept a wire: a wire that
reaches a horizontal component from above or below (or a vertical one
from the side) passes it without touching its terminals.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from circuitcheck.schemas.schematic import Element

logger = logging.getLogger(__name__)


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class PlacedElement:
    """An element bound to its coordinate with its orientation resolved."""

    __slots__ = ("element", "is_horizontal", "terminal_id_base")

    def __init__(self, element: Element):
        self.element = element
        self.is_horizontal = element.is_horizontal
        self.terminal_id_base = element.id

    @property
    def terminals(self) -> tuple[str, str]:
        return f"{self.terminal_id_base}_1", f"{self.terminal_id_base}_2"

    def __repr__(self) -> str:
        return f"PlacedElement({self.element.type}@{self.terminal_id_base})"


def plain_node_id(x: int, y: int) -> str:
    return f"node_{x}_{y}"


class TerminalResolver:
    def __init__(self, elements: Iterable[Element]):
        self._by_coord: dict[tuple[int, int], PlacedElement] = {}
        for element in elements:
            coord = (element.x, element.y)
            previous = self._by_coord.get(coord)
            if previous is not None:
                logger.warning(
                    "Element %s at (%d, %d) replaces %s",
                    element.type,
                    element.x,
                    element.y,
                    previous.element.type,
                )
            self._by_coord[coord] = PlacedElement(element)

    @property
    def elements(self) -> list[PlacedElement]:
        """Surviving elements, one per occupied coordinate."""
        return list(self._by_coord.values())

    def resolve(self, x: int, y: int, side: Side) -> str | None:
        """Node identifier seen by a wire arriving at (x, y) on ``side``.

        Returns None when the wire meets a non-conducting face.
        """
        placed = self._by_coord.get((x, y))
        if placed is None:
            return plain_node_id(x, y)

        first, second = placed.terminals
        if placed.is_horizontal:
            if side is Side.LEFT:
                return first
            if side is Side.RIGHT:
                return second
            return None

        if side is Side.TOP:
            return first
        if side is Side.BOTTOM:
            return second
        return None
