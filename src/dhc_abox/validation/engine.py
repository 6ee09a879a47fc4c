import logging
from collections.abc import Iterable, Sequence

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.errors import MalformedGraphError
from dhc_abox.core.graph import DesignGraph
from dhc_abox.models import Node, Violation
from dhc_abox.validation.helpers import Rule
from dhc_abox.validation.rules import (
    check_cross_section,
    check_delivery_chain,
    check_max_points,
    check_protection_sizing,
)

logger = logging.getLogger(__name__)

GRAPH_INTEGRITY_RULE_ID = "graph-integrity"

RULES: tuple[Rule, ...] = (
    check_max_points,
    check_protection_sizing,
    check_cross_section,
    check_delivery_chain,
)


def run_rules(graph: DesignGraph, rules: Sequence[Rule]) -> list[Violation]:
    """Run ``rules`` in order; a rule that raises is logged and contributes nothing."""
    violations: list[Violation] = []
    for rule in rules:
        try:
            violations.extend(rule(graph))
        except Exception:
            logger.exception("Rule %s failed", getattr(rule, "__name__", rule))
    return violations


def validate_design(
    top_nodes: Iterable[Node],
    config: OntologyConfig,
    rules: Sequence[Rule] = RULES,
) -> list[Violation]:
    """Check a design against the electrical installation rules.

    Never raises: a design that is not a tree yields one ``graph-integrity`` error.
    """
    try:
        graph = DesignGraph.build(top_nodes, config)
    except MalformedGraphError as exc:
        logger.error("Validation aborted: %s", exc)
        return [
            Violation(
                severity="error",
                message=str(exc),
                node_id=exc.node_id,
                rule_id=GRAPH_INTEGRITY_RULE_ID,
            )
        ]

    violations = run_rules(graph, rules)
    logger.info("Validated %d node(s): %d violation(s)", len(graph.nodes), len(violations))
    return violations
