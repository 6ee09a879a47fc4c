"""Render compiled instance records as triple text and as a ``{nodes, links}`` graph."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.resolver import Resolver, local_name
from dhc_abox.models import Attribute, InstanceRecord


def escape_str(value: str) -> str:
    return value.replace('"', '\\"')


def to_literal(attribute: Attribute) -> str:
    if attribute.kind == "numeric":
        return str(attribute.value)
    if attribute.kind == "boolean":
        return str(attribute.value).lower()
    return f'"{escape_str(str(attribute.value))}"'


def prefix_header(config: OntologyConfig) -> list[str]:
    return [f"@prefix {name}: <{iri}> ." for name, iri in config.namespaces.items()]


def to_triple_text(records: Sequence[InstanceRecord], config: OntologyConfig) -> str:
    lines = prefix_header(config)
    lines.append("")

    for record in records:
        block = [record.iri, f"  a {record.class_name} ;"]
        block.extend(f"  {attribute.property} {to_literal(attribute)} ;" for attribute in record.attributes)
        # Containment statements precede references; each group keeps slot order.
        relations = sorted(record.relations, key=lambda relation: relation.kind != "containment")
        block.extend(f"  {relation.property} {relation.target} ;" for relation in relations)
        block[-1] = block[-1][: -len(";")] + "."
        lines.extend(block)
        lines.append("")

    return "\n".join(lines)


def to_graph_json(records: Sequence[InstanceRecord], config: OntologyConfig) -> dict[str, list[dict[str, Any]]]:
    """Build visualization nodes and links; every link source and target is a node id."""
    resolver = Resolver(config)
    nodes: list[dict[str, Any]] = []
    links: list[dict[str, Any]] = []

    for record in records:
        nodes.append(
            {
                "id": record.iri,
                "nodeId": record.node_id,
                "type": record.class_name,
                "label": record.label,
                "designView": resolver.design_view_of(record.node_type),
                "properties": dict(record.properties),
            }
        )
        for relation in record.relations:
            links.append(
                {
                    "source": record.iri,
                    "target": relation.target,
                    "label": local_name(relation.property),
                    "type": relation.kind,
                }
            )

    return {"nodes": nodes, "links": links}
