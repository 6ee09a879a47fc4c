"""Soft nesting checks: is each block placed under a sensible parent?

These warnings complement the installation rules and are opt-in; the editor's
connection types already prevent most misplacements.
"""

from __future__ import annotations

from dhc_abox.core.graph import DesignGraph
from dhc_abox.models import Node, Violation

RULE_ID = "placement"

EQUIPMENT_TYPES = frozenset({"dhc_socket", "dhc_switch", "dhc_light", "dhc_heater", "dhc_equipment"})
TECHNICAL_SPACE_TYPE = "dhc_electrical_technical_space"
TECHNICAL_SPACE_MODULE_PREFIX = "dhc_nfc15100_gtl"


def _is_technical_space(node_type: str) -> bool:
    return node_type == TECHNICAL_SPACE_TYPE or node_type.startswith(TECHNICAL_SPACE_MODULE_PREFIX)


def _issues(node: Node, graph: DesignGraph, parent: Node) -> list[str]:
    """Every nesting check runs on its own, so one block can collect several warnings."""
    node_type = node.type
    parent_type = parent.type
    config = graph.config
    issues: list[str] = []

    if node_type in EQUIPMENT_TYPES and parent_type != "dhc_space" and not config.is_circuit(parent_type):
        issues.append(f"{node.label} should be inside a Space or Circuit, not {parent.label}.")
    if node_type == "dhc_protection_device" and not config.is_circuit(parent_type):
        issues.append(f"{node.label} should be attached to a Circuit.")
    if config.is_circuit(node_type) and parent_type != "dhc_distribution_board":
        issues.append(f"{node.label} should be inside a Distribution Board.")
    if node_type == "dhc_space" and parent_type not in ("dhc_floor", "dhc_area"):
        issues.append(f"{node.label} should be inside a Floor or Area.")
    if _is_technical_space(node_type) and parent_type not in ("dhc_floor", "dhc_area", "dhc_space"):
        issues.append(f"{node.label} should be inside a Floor, Area, or Space.")
    return issues


def check_placement(graph: DesignGraph) -> list[Violation]:
    violations: list[Violation] = []
    for node in graph.nodes:
        parent = graph.parent_of(node)
        if parent is None:
            continue
        violations.extend(
            Violation(severity="warning", message=message, node_id=node.id, rule_id=RULE_ID)
            for message in _issues(node, graph, parent)
        )
    return violations
