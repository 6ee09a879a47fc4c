from dataclasses import dataclass
from typing import Any

from dhc_abox.core.compiler import compile_design
from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.loader import load_workspace
from dhc_abox.core.serializers import to_graph_json, to_triple_text
from dhc_abox.models import Violation
from dhc_abox.validation.engine import RULES, validate_design
from dhc_abox.validation.placement import check_placement


@dataclass(frozen=True)
class CompiledDesign:
    ttl: str
    graph: dict[str, list[dict[str, Any]]]
    record_count: int


def run_compile(document: Any, root_id: str, config: OntologyConfig) -> CompiledDesign:
    """Load a workspace document and produce both A-Box serializations.

    Raises ``WorkspaceFormatError`` or ``MalformedGraphError``.
    """
    nodes = load_workspace(document, config)
    records = compile_design(nodes, root_id, config)
    return CompiledDesign(
        ttl=to_triple_text(records, config),
        graph=to_graph_json(records, config),
        record_count=len(records),
    )


def run_validate(document: Any, config: OntologyConfig, placement: bool = False) -> list[Violation]:
    nodes = load_workspace(document, config)
    rules = (*RULES, check_placement) if placement else RULES
    return validate_design(nodes, config, rules)
