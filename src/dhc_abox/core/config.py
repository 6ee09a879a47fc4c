"""Ontology configuration shared by the loader, resolver, compiler and rules.

One ``OntologyConfig`` is built at startup and passed by reference; nothing in
the package keeps it as module state.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

SlotKind = Literal["containment", "reference"]

_DEFAULT_NAMESPACES: dict[str, str] = {
    "dhc": "https://digitalhome.cloud/ontology#",
    "dhc-instance": "https://digitalhome.cloud/instance#",
    "nfc14100": "https://digitalhome.cloud/ontology/nfc14100#",
    "nfc15100": "https://digitalhome.cloud/ontology/nfc15100#",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
}

_DEFAULT_MODULES: dict[str, str] = {
    "dhc_nfc14100_": "nfc14100",
    "dhc_nfc15100_": "nfc15100",
}

_DEFAULT_CLASSES: dict[str, str] = {
    "dhc_nfc14100_nf14_energy_meter": "nfc14100:NF14EnergyMeter",
    "dhc_nfc14100_nf14_emergency_disconnect": "nfc14100:NF14EmergencyDisconnect",
    "dhc_nfc15100_gtl": "nfc15100:GTL",
    "dhc_wifi_ap": "dhc:WiFiAccessPoint",
    "dhc_lan_switch": "dhc:LANSwitch",
}

_DEFAULT_RELATIONS: dict[str, str] = {
    "HASAREA": "hasArea",
    "HASFLOOR": "hasFloor",
    "HASSPACE": "hasSpace",
    "HASCIRCUIT": "hasCircuit",
    "FEEDSEQUIPMENT": "feedsEquipment",
    "HASEQUIPMENT": "hasEquipment",
    "HASBUILDINGELEMENT": "hasBuildingElement",
    "HASWIRING": "hasWiring",
    "BELONGSTOZONE": "belongsToZone",
    "HASEQUIPMENTTYPE": "hasEquipmentType",
    "HASPROTECTION": "hasProtection",
    "HASCIRCUITTYPE": "hasCircuitType",
    "CONNECTEDTONETWORK": "connectedToNetwork",
    "HASPART": "hasPart",
    "FEEDS": "feeds",
    "HASDISTRIBUTIONBOARD": "hasDistributionBoard",
}

_DEFAULT_REFERENCE_SLOTS: frozenset[str] = frozenset(
    {"HASPROTECTION", "BELONGSTOZONE", "HASEQUIPMENTTYPE", "HASCIRCUITTYPE", "CONNECTEDTONETWORK", "FEEDS"}
)

_SPATIAL_PATTERNS = ("floor", "space", "zone", "area", "real_estate")
_ELECTRICAL_PATTERNS = ("circuit", "distribution", "protection", "wiring", "socket", "switch", "light", "heater")

_INPUT_KINDS: dict[str, SlotKind] = {
    "input_statement": "containment",
    "input_value": "reference",
}

CONFIG_ENV_VAR = "DHC_ONTOLOGY_CONFIG"
BLOCK_DEFINITIONS_ENV_VAR = "DHC_BLOCK_DEFINITIONS"


class OntologyConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type_prefix: str = "dhc_"
    default_prefix: str = "dhc"
    instance_prefix: str = "dhc-instance"
    label_property: str = "rdfs:label"
    namespaces: dict[str, str] = _DEFAULT_NAMESPACES
    modules: dict[str, str] = _DEFAULT_MODULES
    classes: dict[str, str] = _DEFAULT_CLASSES
    relations: dict[str, str] = _DEFAULT_RELATIONS
    reference_slots: frozenset[str] = _DEFAULT_REFERENCE_SLOTS
    slot_kinds: dict[str, dict[str, SlotKind]] = {}
    circuit_type: str = "dhc_circuit"
    circuit_module_prefix: str = "dhc_nfc15100_"
    spatial_patterns: tuple[str, ...] = _SPATIAL_PATTERNS
    electrical_patterns: tuple[str, ...] = _ELECTRICAL_PATTERNS

    def is_managed(self, node_type: str) -> bool:
        return node_type.startswith(self.type_prefix)

    def is_circuit(self, node_type: str) -> bool:
        return node_type == self.circuit_type or node_type.startswith(self.circuit_module_prefix)

    def is_module_circuit(self, node_type: str) -> bool:
        return node_type.startswith(self.circuit_module_prefix)

    def slot_kind(self, node_type: str, slot: str) -> SlotKind:
        registered = self.slot_kinds.get(node_type)
        if registered is not None and slot in registered:
            return registered[slot]
        return "reference" if slot in self.reference_slots else "containment"

    def with_block_definitions(self, definitions: list[dict[str, Any]]) -> OntologyConfig:
        """Return a copy with slot kinds registered from Blockly JSON block definitions."""
        slot_kinds = {node_type: dict(kinds) for node_type, kinds in self.slot_kinds.items()}
        for definition in definitions:
            node_type = definition.get("type")
            if not isinstance(node_type, str):
                continue
            kinds = slot_kinds.setdefault(node_type, {})
            for key, args in definition.items():
                if not key.startswith("args") or not isinstance(args, list):
                    continue
                for arg in args:
                    if not isinstance(arg, dict):
                        continue
                    kind = _INPUT_KINDS.get(str(arg.get("type", "")))
                    if kind is not None and "name" in arg:
                        kinds[str(arg["name"])] = kind
        logger.info("Registered slot kinds for %d block type(s)", len(slot_kinds))
        return self.model_copy(update={"slot_kinds": slot_kinds})


def load_config(path: str | Path | None = None) -> OntologyConfig:
    """Build the configuration from an optional JSON file and the environment.

    ``path`` (or ``$DHC_ONTOLOGY_CONFIG``) holds overrides of any
    ``OntologyConfig`` field; ``$DHC_BLOCK_DEFINITIONS`` points at the editor's
    Blockly block definitions, used to register slot kinds.
    """
    config_path = path or os.getenv(CONFIG_ENV_VAR)
    if config_path:
        config = OntologyConfig.model_validate(_read_json(Path(config_path)))
    else:
        config = OntologyConfig()

    definitions_path = os.getenv(BLOCK_DEFINITIONS_ENV_VAR)
    if definitions_path:
        definitions = _read_json(Path(definitions_path))
        if not isinstance(definitions, list):
            raise ValueError(f"Block definitions must be a JSON list: {definitions_path}")
        config = config.with_block_definitions(definitions)

    return config


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
