"""NF C 15-100: protection device rating against the load a circuit feeds.

Plain circuits infer a load category from their equipment: lighting circuits
take at most a 10A breaker, socket circuits at most 16A, and dedicated circuits
typically 20A or 32A. Module circuits carry their mandated rating themselves and
the attached device must match it exactly.
"""

from typing import Literal

from dhc_abox.core.graph import CircuitView, DesignGraph
from dhc_abox.models import Node, Violation
from dhc_abox.validation.helpers import format_number

MISSING_RULE_ID = "nfc15100-protection-missing"
SIZING_RULE_ID = "nfc15100-protection-sizing"

LoadCategory = Literal["lighting", "sockets", "dedicated", "mixed"]

_EQUIPMENT_CATEGORIES: dict[str, LoadCategory] = {
    "dhc_light": "lighting",
    "dhc_socket": "sockets",
    "dhc_heater": "dedicated",
}

MAX_RATINGS: dict[LoadCategory, float] = {"lighting": 10, "sockets": 16}
MIN_RATINGS: dict[LoadCategory, float] = {"dedicated": 20}


def infer_load_category(equipment: list[Node]) -> LoadCategory:
    types = {node.type for node in equipment}
    if len(types) != 1:
        return "mixed"
    return _EQUIPMENT_CATEGORIES.get(types.pop(), "dedicated")


def _check_plain(circuit: CircuitView, device: Node) -> Violation | None:
    category = infer_load_category(circuit.equipment)
    rating = device.number("RATED_CURRENT") or 0
    amps = format_number(rating)

    ceiling = MAX_RATINGS.get(category)
    if ceiling is not None and rating > ceiling:
        return Violation(
            severity="error",
            message=(
                f'Circuit "{circuit.label}" ({category}) has {amps}A breaker "{device.label}", '
                f"max {format_number(ceiling)}A required."
            ),
            node_id=device.id,
            rule_id=SIZING_RULE_ID,
        )

    floor = MIN_RATINGS.get(category)
    if floor is not None and rating < floor:
        return Violation(
            severity="warning",
            message=(
                f'Circuit "{circuit.label}" ({category}) has {amps}A breaker "{device.label}", '
                f"typically needs {format_number(floor)}A or 32A."
            ),
            node_id=device.id,
            rule_id=SIZING_RULE_ID,
        )

    return None


def _check_module(circuit: CircuitView, device: Node) -> Violation | None:
    mandated = circuit.rated_current
    if mandated is None:
        return None

    rating = device.number("RATED_CURRENT") or 0
    if rating == mandated:
        return None

    return Violation(
        severity="error",
        message=(
            f'Circuit "{circuit.label}" mandates a {format_number(mandated)}A protection device, '
            f'but "{device.label}" is rated {format_number(rating)}A.'
        ),
        node_id=device.id,
        rule_id=SIZING_RULE_ID,
    )


def check_protection_sizing(graph: DesignGraph) -> list[Violation]:
    violations: list[Violation] = []

    for circuit in graph.circuits():
        device = circuit.protection
        if device is None:
            violations.append(
                Violation(
                    severity="warning",
                    message=f'Circuit "{circuit.label}" has no protection device.',
                    node_id=circuit.id,
                    rule_id=MISSING_RULE_ID,
                )
            )
            continue

        violation = _check_module(circuit, device) if circuit.module else _check_plain(circuit, device)
        if violation is not None:
            violations.append(violation)

    return violations
