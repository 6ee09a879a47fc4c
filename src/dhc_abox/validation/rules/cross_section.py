"""NF C 15-100: minimum conductor cross-section for a protection rating."""

from dhc_abox.core.graph import CircuitView, DesignGraph
from dhc_abox.models import Violation
from dhc_abox.validation.helpers import format_number

RULE_ID = "nfc15100-wire-cross-section"

# (max current in A, min cross-section in mm²), ascending
CURRENT_TO_CROSS_SECTION: tuple[tuple[float, float], ...] = (
    (10, 1.5),
    (16, 1.5),
    (20, 2.5),
    (25, 4),
    (32, 6),
    (40, 10),
    (50, 16),
)


def min_cross_section(current: float) -> float | None:
    for max_current, cross_section in CURRENT_TO_CROSS_SECTION:
        if current <= max_current:
            return cross_section
    return None


def _undersized(circuit: CircuitView, node_id: str, cross_section: float, current: float) -> Violation | None:
    if cross_section <= 0 or current <= 0:
        return None
    required = min_cross_section(current)
    if required is None or cross_section >= required:
        return None
    return Violation(
        severity="error",
        message=(
            f'Circuit "{circuit.label}": {format_number(cross_section)}mm² wire too small for '
            f"{format_number(current)}A, needs at least {format_number(required)}mm²."
        ),
        node_id=node_id,
        rule_id=RULE_ID,
    )


def check_cross_section(graph: DesignGraph) -> list[Violation]:
    violations: list[Violation] = []

    for circuit in graph.circuits():
        if circuit.module:
            violation = _undersized(
                circuit,
                circuit.id,
                circuit.cross_section or 0,
                circuit.rated_current or 0,
            )
            if violation is not None:
                violations.append(violation)
            continue

        device = circuit.protection
        if device is None:
            continue
        rating = device.number("RATED_CURRENT") or 0

        for segment in circuit.wiring:
            violation = _undersized(circuit, segment.id, segment.number("CROSS_SECTION") or 0, rating)
            if violation is not None:
                violations.append(violation)

    return violations
