from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

from circuitcheck.errors import InvalidSchematic


class ComponentCategory(str, Enum):
    SOURCE = "source"
    LOAD = "load"
    SWITCH_OPEN = "switch_open"
    SWITCH_CLOSED = "switch_closed"
    OTHER = "other"


SWITCH_CATEGORIES = frozenset(
    {ComponentCategory.SWITCH_OPEN, ComponentCategory.SWITCH_CLOSED}
)

# Component tags as drawn by the schematic editor
COMPONENT_CATALOG: dict[str, ComponentCategory] = {
    "bat": ComponentCategory.SOURCE,
    "lamp": ComponentCategory.LOAD,
    "sw_open": ComponentCategory.SWITCH_OPEN,
    "sw_closed": ComponentCategory.SWITCH_CLOSED,
    "resistor": ComponentCategory.OTHER,
    "motor": ComponentCategory.OTHER,
    "buzzer": ComponentCategory.OTHER,
    "led": ComponentCategory.OTHER,
    "diode": ComponentCategory.OTHER,
    "ammeter": ComponentCategory.OTHER,
    "voltmeter": ComponentCategory.OTHER,
    "fuse": ComponentCategory.OTHER,
}


class Element(BaseModel):
    """A component placed on one grid coordinate.

    ``rotation`` is in radians. The element is horizontal when
    ``|cos(rotation)| > 0.5``; terminal 1 is then on the left,
    otherwise on the top.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    x: int
    y: int
    rotation: float = Field(default=0.0, allow_inf_nan=False)

    _category: ComponentCategory = PrivateAttr()

    @field_validator("type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value not in COMPONENT_CATALOG:
            known = ", ".join(sorted(COMPONENT_CATALOG))
            raise ValueError(f"unknown component type '{value}' (expected one of {known})")
        return value

    @field_validator("rotation", mode="before")
    @classmethod
    def _unrotated_when_null(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    def model_post_init(self, __context: Any) -> None:
        self._category = COMPONENT_CATALOG[self.type]

    @property
    def id(self) -> str:
        return f"elem_{self.x}_{self.y}"

    @property
    def category(self) -> ComponentCategory:
        return self._category

    @property
    def is_horizontal(self) -> bool:
        return abs(math.cos(self.rotation)) > 0.5


class WireSegment(BaseModel):
    """Axis-aligned wire between two grid points, possibly several cells long."""

    model_config = ConfigDict(frozen=True)

    x1: int
    y1: int
    x2: int
    y2: int

    @model_validator(mode="after")
    def _axis_aligned(self) -> WireSegment:
        if (self.x1 == self.x2) == (self.y1 == self.y2):
            raise ValueError(
                f"wire ({self.x1},{self.y1})-({self.x2},{self.y2}) must be "
                "horizontal or vertical with a non-zero length"
            )
        return self

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2


class UnitSegment(BaseModel):
    """Length-1 wire piece; the first endpoint is always the left or top one."""

    model_config = ConfigDict(frozen=True)

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def between(cls, a: tuple[int, int], b: tuple[int, int]) -> UnitSegment:
        (x1, y1), (x2, y2) = sorted((a, b))
        return cls(x1=x1, y1=y1, x2=x2, y2=y2)

    @property
    def key(self) -> str:
        return f"{self.x1},{self.y1}-{self.x2},{self.y2}"

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2


class Schematic(BaseModel):
    elements: list[Element] = Field(default_factory=list)
    wires: list[WireSegment] = Field(default_factory=list)


def parse_schematic(data: Any) -> Schematic:
    """Validate raw ``{elements, wires}`` data into a Schematic."""
    if isinstance(data, Schematic):
        return data
    try:
        return Schematic.model_validate(data)
    except ValidationError as e:
        raise InvalidSchematic("Schematic failed validation", errors=str(e)) from e
