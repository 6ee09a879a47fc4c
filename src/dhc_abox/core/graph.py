"""Flat, read-only index over a block design, shared by every rule of one validation run."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.errors import MalformedGraphError
from dhc_abox.models import Node

FEEDS_EQUIPMENT = "FEEDSEQUIPMENT"
HAS_PROTECTION = "HASPROTECTION"
HAS_WIRING = "HASWIRING"


@dataclass(frozen=True)
class CircuitView:
    """Typed access to the slots and fields the electrical rules read from a circuit."""

    node: Node
    module: bool

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def label(self) -> str:
        return self.node.label

    @property
    def max_points(self) -> float | None:
        return self.node.number("MAX_POINTS")

    @property
    def rated_current(self) -> float | None:
        return self.node.number("RATED_CURRENT")

    @property
    def cross_section(self) -> float | None:
        return self.node.number("CROSS_SECTION")

    @property
    def equipment(self) -> list[Node]:
        return self.node.children(FEEDS_EQUIPMENT)

    @property
    def protection(self) -> Node | None:
        return self.node.reference(HAS_PROTECTION)

    @property
    def wiring(self) -> list[Node]:
        return self.node.children(HAS_WIRING)


class DesignGraph:
    def __init__(self, nodes: list[Node], parents: dict[str, Node], config: OntologyConfig) -> None:
        self.nodes = nodes
        self.config = config
        self._parents = parents

    @classmethod
    def build(cls, top_nodes: Iterable[Node], config: OntologyConfig) -> DesignGraph:
        """Index every node reachable from ``top_nodes``.

        Raises ``MalformedGraphError`` when a node is reached twice.
        """
        nodes: list[Node] = []
        parents: dict[str, Node] = {}
        visited: set[str] = set()
        stack: list[tuple[Node, Node | None]] = [(node, None) for node in reversed(list(top_nodes))]

        while stack:
            node, parent = stack.pop()
            if node.id in visited:
                raise MalformedGraphError(node.id, node.type)
            visited.add(node.id)
            nodes.append(node)
            if parent is not None:
                parents[node.id] = parent

            successors = [child for _, _, targets in node.slots() for child in targets]
            stack.extend((successor, node) for successor in reversed(successors))

        return cls(nodes, parents, config)

    def parent_of(self, node: Node) -> Node | None:
        return self._parents.get(node.id)

    def with_prefix(self, type_prefix: str) -> list[Node]:
        return [node for node in self.nodes if node.type.startswith(type_prefix)]

    def has_type(self, node_type: str) -> bool:
        return any(node.type == node_type for node in self.nodes)

    def circuits(self) -> list[CircuitView]:
        return [
            CircuitView(node=node, module=self.config.is_module_circuit(node.type))
            for node in self.nodes
            if self.config.is_circuit(node.type)
        ]
