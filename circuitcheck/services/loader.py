"""Schematic loader — JSON document on disk → Schematic."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from circuitcheck.errors import InvalidSchematic
from circuitcheck.schemas.schematic import Schematic, parse_schematic

logger = logging.getLogger(__name__)


def load_schematic(path: str | Path) -> Schematic:
    """Read a ``{"elements": [...], "wires": [...]}`` JSON file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        raise InvalidSchematic(f"{path} is not valid UTF-8 JSON", errors=str(e)) from e

    schematic = parse_schematic(data)
    logger.debug(
        "Loaded %s: %d elements, %d wires",
        path,
        len(schematic.elements),
        len(schematic.wires),
    )
    return schematic
