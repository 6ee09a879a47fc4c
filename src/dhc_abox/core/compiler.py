import logging
from collections.abc import Iterable

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.errors import MalformedGraphError
from dhc_abox.core.resolver import Resolver, local_name
from dhc_abox.models import Attribute, AttributeKind, FieldValue, InstanceRecord, Node, Relation, to_number

logger = logging.getLogger(__name__)


def classify_value(value: FieldValue | None) -> AttributeKind | None:
    """Literal kind of a raw field value, or None when the value is empty."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return "boolean"
    if to_number(value) is not None:
        return "numeric"
    if value in ("TRUE", "FALSE"):
        return "boolean"
    return "string"


def compile_design(top_nodes: Iterable[Node], root_id: str, config: OntologyConfig) -> list[InstanceRecord]:
    """Lower a block design into one instance record per managed node, in pre-order.

    Nodes whose type resolves to no class are skipped together with their subtree.
    Raises ``MalformedGraphError`` when a node is reachable more than once.
    """
    resolver = Resolver(config)
    records: list[InstanceRecord] = []
    visited: set[str] = set()

    def managed_iri(node: Node) -> str | None:
        if resolver.class_of(node.type) is None:
            return None
        return resolver.iri(root_id, node.type, node.id)

    def visit(node: Node) -> None:
        class_name = resolver.class_of(node.type)
        if class_name is None:
            logger.debug("Skipping unmanaged node %s (%s)", node.id, node.type)
            return
        if node.id in visited:
            raise MalformedGraphError(node.id, node.type)
        visited.add(node.id)

        attributes: list[Attribute] = []
        for name, value in node.fields.items():
            kind = classify_value(value)
            if kind is not None:
                attributes.append(Attribute(property=resolver.property_of(name), value=value, kind=kind))

        slots = node.slots()
        relations: list[Relation] = []
        for slot, relation_kind, targets in slots:
            prop = resolver.relation_property_of(slot)
            for target_node in targets:
                target = managed_iri(target_node)
                if target is not None:
                    relations.append(Relation(property=prop, target=target, kind=relation_kind))

        records.append(
            InstanceRecord(
                iri=resolver.iri(root_id, node.type, node.id),
                node_id=node.id,
                node_type=node.type,
                class_name=class_name,
                label=str(node.field("LABEL") or local_name(class_name)),
                attributes=attributes,
                relations=relations,
                properties=dict(node.fields),
            )
        )

        for _, _, targets in slots:
            for child in targets:
                visit(child)

    for node in top_nodes:
        visit(node)

    logger.info("Compiled %d instance record(s) for design %s", len(records), root_id)
    return records
