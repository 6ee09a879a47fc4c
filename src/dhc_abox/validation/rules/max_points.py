"""NF C 15-100: maximum number of points fed by one circuit."""

from dhc_abox.core.graph import DesignGraph
from dhc_abox.models import Violation
from dhc_abox.validation.helpers import format_number

RULE_ID = "nfc15100-max-points"
DEFAULT_MAX_POINTS = 8


def check_max_points(graph: DesignGraph) -> list[Violation]:
    violations: list[Violation] = []

    for circuit in graph.circuits():
        # Unset, non-numeric and zero limits all fall back to the default.
        max_points = circuit.max_points or DEFAULT_MAX_POINTS
        points = len(circuit.equipment)

        if points > max_points:
            violations.append(
                Violation(
                    severity="error",
                    message=(
                        f'Circuit "{circuit.label}" has {points} points but max is {format_number(max_points)}.'
                    ),
                    node_id=circuit.id,
                    rule_id=RULE_ID,
                )
            )

    return violations
