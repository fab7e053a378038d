"""Circuit Topology Engine — Deterministic Closed-Loop Checker.

Pure Python. No simulation. Fully unit-testable.

Decides whether a grid schematic forms at least one closed loop that
runs through a source, a load and a switch:
  1. Required components (at least one source, load and switch)
  2. Wires → unit segments → connectivity graph → node-groups
  3. Short circuit detection (both terminals of a component in one group)
  4. Loop search from each source back to itself

Input:  Schematic (Pydantic model) or raw {elements, wires} data
Output: AnalysisResult with valid flag, failure code and reason
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from circuitcheck.config import get_settings
from circuitcheck.errors import SearchBudgetExceeded
from circuitcheck.schemas.analysis import AnalysisResult, FailureCode
from circuitcheck.schemas.schematic import (
    SWITCH_CATEGORIES,
    ComponentCategory,
    Schematic,
    parse_schematic,
)
from circuitcheck.topology.graph import NodeGroups, build_connectivity_graph
from circuitcheck.topology.messages import FALLBACK_LANGUAGE, reason_text
from circuitcheck.topology.segments import normalize_wires
from circuitcheck.topology.terminals import PlacedElement, TerminalResolver

logger = logging.getLogger(__name__)


# ─── Internal Helpers ───


def _failure(
    code: FailureCode,
    language: str,
    element_ids: list[str] | None = None,
    **values: str,
) -> AnalysisResult:
    return AnalysisResult(
        valid=False,
        code=code,
        reason=reason_text(code, language, **values),
        element_ids=element_ids or [],
    )


def _has_load_and_switch(elements: Iterable[PlacedElement]) -> bool:
    categories = {placed.element.category for placed in elements}
    return ComponentCategory.LOAD in categories and not categories.isdisjoint(
        SWITCH_CATEGORIES
    )


# ═══════════════════════════════════════════════════════════
# Check 1: Required Components
# ═══════════════════════════════════════════════════════════


def check_required_components(
    elements: list[PlacedElement],
    language: str = FALLBACK_LANGUAGE,
) -> AnalysisResult | None:
    """A schematic needs a source, a load and a switch, wired or not."""
    has_source = any(
        placed.element.category is ComponentCategory.SOURCE for placed in elements
    )
    if has_source and _has_load_and_switch(elements):
        return None
    return _failure(FailureCode.MISSING_COMPONENTS, language)


# ═══════════════════════════════════════════════════════════
# Check 2: Short Circuits
# ═══════════════════════════════════════════════════════════


def check_short_circuits(
    elements: list[PlacedElement],
    groups: NodeGroups,
    language: str = FALLBACK_LANGUAGE,
) -> AnalysisResult | None:
    """Fail on the first component whose terminals share a node-group.

    Applies to every category: a bridged switch is as shorted as a
    bridged lamp.
    """
    for placed in elements:
        first, second = placed.terminals
        if groups.group_of(first) == groups.group_of(second):
            return _failure(
                FailureCode.SHORT_CIRCUIT,
                language,
                element_ids=[placed.terminal_id_base],
                component=placed.element.type,
            )
    return None


# ═══════════════════════════════════════════════════════════
# Check 3: Closed Loop Search
# ═══════════════════════════════════════════════════════════


def _element_edges(
    elements: list[PlacedElement],
    groups: NodeGroups,
) -> dict[int, list[tuple[PlacedElement, int]]]:
    """Every non-source component links the node-groups of its terminals."""
    edges: dict[int, list[tuple[PlacedElement, int]]] = {}
    for placed in elements:
        if placed.element.category is ComponentCategory.SOURCE:
            continue
        first, second = (groups.group_of(t) for t in placed.terminals)
        edges.setdefault(first, []).append((placed, second))
        edges.setdefault(second, []).append((placed, first))
    return edges


def find_closed_loop(
    elements: list[PlacedElement],
    groups: NodeGroups,
    max_steps: int,
) -> list[PlacedElement] | None:
    """Return the first loop found (source first), or None.

    From each source the search walks from the node-group of terminal 2
    to the node-group of terminal 1 through distinct non-source
    components. Reaching the target ends the branch; it only counts when
    the path holds a load and a switch. A state is the current group plus
    the set of components used, and is never expanded twice.

    Raises:
        SearchBudgetExceeded: more than ``max_steps`` states were popped.
    """
    edges = _element_edges(elements, groups)
    steps = 0

    for source in elements:
        if source.element.category is not ComponentCategory.SOURCE:
            continue

        first, second = source.terminals
        start, target = groups.group_of(second), groups.group_of(first)
        stack: list[tuple[int, tuple[PlacedElement, ...]]] = [(start, ())]
        seen: set[tuple[int, frozenset[str]]] = {(start, frozenset())}

        while stack:
            group, path = stack.pop()
            steps += 1
            if steps > max_steps:
                raise SearchBudgetExceeded(max_steps)

            if group == target:
                if _has_load_and_switch(path):
                    return [source, *path]
                continue

            used = frozenset(placed.terminal_id_base for placed in path)
            for placed, other in edges.get(group, ()):
                if placed.terminal_id_base in used:
                    continue
                state = (other, used | {placed.terminal_id_base})
                if state in seen:
                    continue
                seen.add(state)
                stack.append((other, path + (placed,)))

    return None


# ═══════════════════════════════════════════════════════════
# Main Analyzer
# ═══════════════════════════════════════════════════════════


def analyze_circuit(
    schematic: Schematic | Mapping[str, Any],
    *,
    language: str | None = None,
    max_search_steps: int | None = None,
) -> AnalysisResult:
    """Check that a schematic is a working closed circuit.

    Args:
        schematic: The schematic, or raw ``{elements, wires}`` data.
        language: Language of the reason text. Defaults to settings.
        max_search_steps: Loop search budget. Defaults to settings.

    Returns:
        AnalysisResult; ``valid`` is False with a reason for missing
        components, a short circuit or an open loop (checked in that order).

    Raises:
        InvalidSchematic: the input is malformed or its wires are too long.
        ValueError: ``max_search_steps`` is below 1.
        SearchBudgetExceeded: the loop search ran out of budget.
    """
    settings = get_settings()
    language = language or settings.language
    max_steps = (
        max_search_steps if max_search_steps is not None else settings.max_search_steps
    )
    if max_steps < 1:
        raise ValueError(f"max_search_steps must be at least 1, got {max_steps}")

    schematic = parse_schematic(schematic)
    resolver = TerminalResolver(schematic.elements)
    elements = resolver.elements

    missing = check_required_components(elements, language)
    if missing is not None:
        logger.info("Schematic rejected: %s", missing.code.value)
        return missing

    segments = normalize_wires(schematic.wires, settings.max_unit_segments)
    adjacency = build_connectivity_graph(segments, resolver)
    groups = NodeGroups(adjacency)
    logger.debug(
        "%d unit segments, %d graph nodes, %d wired node-groups",
        len(segments),
        len(adjacency),
        groups.connected_count,
    )

    shorted = check_short_circuits(elements, groups, language)
    if shorted is not None:
        logger.info(
            "Schematic rejected: short circuit on %s", shorted.element_ids[0]
        )
        return shorted

    loop = find_closed_loop(elements, groups, max_steps)
    if loop is None:
        logger.info("Schematic rejected: %s", FailureCode.LOOP_NOT_CLOSED.value)
        return _failure(FailureCode.LOOP_NOT_CLOSED, language)

    logger.info("Closed loop found: %s", ", ".join(p.terminal_id_base for p in loop))
    return AnalysisResult(valid=True, loop=[placed.terminal_id_base for placed in loop])
