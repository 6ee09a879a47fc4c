"""Unit tests for loading saved editor workspaces."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.errors import WorkspaceFormatError
from dhc_abox.core.loader import load_workspace, load_workspace_file


class TestLoadWorkspace:
    def test_top_level_blocks_in_order(self, house_workspace: dict[str, Any], config: OntologyConfig) -> None:
        nodes = load_workspace(house_workspace, config)
        assert [n.id for n in nodes] == ["floor-1", "board-1"]

    def test_next_chain_becomes_ordered_children(self, house_workspace: dict[str, Any], config: OntologyConfig) -> None:
        board = load_workspace(house_workspace, config)[1]
        circuit = board.children("HASCIRCUIT")[0]
        assert [n.id for n in circuit.children("FEEDSEQUIPMENT")] == ["socket-1", "socket-2"]

    def test_known_reference_slot(self, house_workspace: dict[str, Any], config: OntologyConfig) -> None:
        circuit = load_workspace(house_workspace, config)[1].children("HASCIRCUIT")[0]
        device = circuit.reference("HASPROTECTION")
        assert device is not None
        assert device.id == "breaker-1"
        assert "HASPROTECTION" not in circuit.containment

    def test_slot_order_is_recorded(self, config: OntologyConfig) -> None:
        block = {
            "type": "dhc_circuit",
            "id": "c1",
            "inputs": {
                "HASPROTECTION": {"block": {"type": "dhc_protection_device", "id": "p1"}},
                "FEEDSEQUIPMENT": {"block": {"type": "dhc_socket", "id": "s1"}},
            },
        }
        circuit = load_workspace([block], config)[0]
        assert [(slot, kind) for slot, kind, _ in circuit.slots()] == [
            ("HASPROTECTION", "reference"),
            ("FEEDSEQUIPMENT", "containment"),
        ]

    def test_fields_keep_declared_order(self, house_workspace: dict[str, Any], config: OntologyConfig) -> None:
        floor = load_workspace(house_workspace, config)[0]
        assert list(floor.fields) == ["LABEL", "LEVEL"]

    def test_accepts_bare_list_and_flat_blocks(self, config: OntologyConfig) -> None:
        block = {"type": "dhc_space", "id": "s1"}
        assert load_workspace([block], config)[0].id == "s1"
        assert load_workspace({"blocks": [block]}, config)[0].id == "s1"

    def test_empty_workspace(self, config: OntologyConfig) -> None:
        assert load_workspace({}, config) == []

    def test_drops_non_scalar_fields(self, config: OntologyConfig) -> None:
        block = {"type": "dhc_space", "id": "s1", "fields": {"LABEL": "Hall", "VAR": {"id": "v1"}}}
        node = load_workspace([block], config)[0]
        assert node.fields == {"LABEL": "Hall"}

    def test_reference_slot_keeps_first_block_of_chain(self, config: OntologyConfig) -> None:
        block = {
            "type": "dhc_circuit",
            "id": "c1",
            "inputs": {
                "HASPROTECTION": {
                    "block": {
                        "type": "dhc_protection_device",
                        "id": "p1",
                        "next": {"block": {"type": "dhc_protection_device", "id": "p2"}},
                    }
                }
            },
        }
        circuit = load_workspace([block], config)[0]
        device = circuit.reference("HASPROTECTION")
        assert device is not None
        assert device.id == "p1"

    def test_registered_block_definitions_decide_slot_kind(self, config: OntologyConfig) -> None:
        definitions = [
            {
                "type": "dhc_circuit",
                "message0": "circuit %1 %2",
                "args0": [
                    {"type": "input_value", "name": "SUPPLIEDBY"},
                    {"type": "input_statement", "name": "HASPROTECTION"},
                ],
            }
        ]
        registered = config.with_block_definitions(definitions)
        block = {
            "type": "dhc_circuit",
            "id": "c1",
            "inputs": {
                "SUPPLIEDBY": {"block": {"type": "dhc_distribution_board", "id": "b1"}},
                "HASPROTECTION": {"block": {"type": "dhc_protection_device", "id": "p1"}},
            },
        }
        circuit = load_workspace([block], registered)[0]
        supplier = circuit.reference("SUPPLIEDBY")
        assert supplier is not None
        assert supplier.id == "b1"
        assert [n.id for n in circuit.children("HASPROTECTION")] == ["p1"]

    def test_unregistered_unknown_slot_is_containment(self, config: OntologyConfig) -> None:
        block = {"type": "dhc_space", "id": "s1", "inputs": {"HASPART": {"block": {"type": "dhc_wall", "id": "w1"}}}}
        space = load_workspace([block], config)[0]
        assert [n.id for n in space.children("HASPART")] == ["w1"]

    @pytest.mark.parametrize(
        "document",
        [
            "not a workspace",
            {"blocks": "nope"},
            [{"type": "dhc_space"}],
            [{"id": "x"}],
            ["block"],
            [{"type": "dhc_space", "id": "s1", "inputs": []}],
        ],
        ids=["string", "blocks-string", "missing-id", "missing-type", "non-object", "inputs-list"],
    )
    def test_malformed_documents_raise(self, document: Any, config: OntologyConfig) -> None:
        with pytest.raises(WorkspaceFormatError):
            load_workspace(document, config)


class TestLoadWorkspaceFile:
    def test_reads_file(self, tmp_path: Path, house_workspace: dict[str, Any], config: OntologyConfig) -> None:
        path = tmp_path / "workspace.json"
        path.write_text(json.dumps(house_workspace), encoding="utf-8")
        assert len(load_workspace_file(path, config)) == 2

    def test_missing_file(self, tmp_path: Path, config: OntologyConfig) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_workspace_file(tmp_path / "absent.json", config)

    def test_invalid_json(self, tmp_path: Path, config: OntologyConfig) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(WorkspaceFormatError, match="not valid JSON"):
            load_workspace_file(path, config)
