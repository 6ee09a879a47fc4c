import json
import logging
from pathlib import Path
from typing import Any

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.errors import WorkspaceFormatError
from dhc_abox.models import FieldValue, Node

logger = logging.getLogger(__name__)


def _top_level_blocks(document: Any) -> list[Any]:
    """Accept ``{"blocks": {"blocks": [...]}}``, ``{"blocks": [...]}`` or a bare list."""
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        blocks = document.get("blocks", [])
        if isinstance(blocks, dict):
            blocks = blocks.get("blocks", [])
        if isinstance(blocks, list):
            return blocks
    raise WorkspaceFormatError("Workspace document must hold a list of top-level blocks.")


def _chain(connection: Any) -> list[dict[str, Any]]:
    """Follow a ``{"block": ..., "next": {"block": ...}}`` chain in order."""
    blocks: list[dict[str, Any]] = []
    current = connection.get("block") if isinstance(connection, dict) else None
    while current is not None:
        if not isinstance(current, dict):
            raise WorkspaceFormatError("Every connected block must be a JSON object.")
        blocks.append(current)
        following = current.get("next")
        current = following.get("block") if isinstance(following, dict) else None
    return blocks


def _scalar_fields(block_id: str, raw_fields: Any) -> dict[str, FieldValue]:
    if not isinstance(raw_fields, dict):
        return {}
    fields: dict[str, FieldValue] = {}
    for name, value in raw_fields.items():
        if isinstance(value, (str | int | float | bool)):
            fields[str(name)] = value
        else:
            logger.debug("Dropping non-scalar field %s on block %s", name, block_id)
    return fields


def load_workspace(document: Any, config: OntologyConfig) -> list[Node]:
    """Build the top-level nodes of a persisted editor workspace."""

    def block_to_node(block: dict[str, Any]) -> Node:
        node_type = block.get("type")
        block_id = block.get("id")
        if not isinstance(node_type, str) or not isinstance(block_id, str):
            raise WorkspaceFormatError("Every block needs a string 'type' and 'id'.")

        containment: dict[str, list[Node]] = {}
        references: dict[str, Node] = {}
        inputs = block.get("inputs") or {}
        if not isinstance(inputs, dict):
            raise WorkspaceFormatError(f"Block {block_id} has malformed 'inputs'.")

        for slot, connection in inputs.items():
            connected = _chain(connection)
            if config.slot_kind(node_type, slot) == "containment":
                containment[slot] = [block_to_node(child) for child in connected]
            elif connected:
                if len(connected) > 1:
                    logger.warning("Reference slot %s on block %s holds a chain; keeping its first block", slot, block_id)
                references[slot] = block_to_node(connected[0])

        return Node(
            id=block_id,
            type=node_type,
            fields=_scalar_fields(block_id, block.get("fields")),
            containment=containment,
            references=references,
            slot_order=[str(slot) for slot in inputs],
        )

    nodes = []
    for block in _top_level_blocks(document):
        if not isinstance(block, dict):
            raise WorkspaceFormatError("Every top-level block must be a JSON object.")
        nodes.append(block_to_node(block))
    return nodes


def read_document(path: str | Path) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise WorkspaceFormatError(f"Workspace {path} is not valid JSON: {exc}") from exc


def load_workspace_file(path: str | Path, config: OntologyConfig) -> list[Node]:
    return load_workspace(read_document(path), config)
