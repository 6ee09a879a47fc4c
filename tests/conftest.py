"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from dhc_abox.core.config import OntologyConfig

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> OntologyConfig:
    """Return the default ontology configuration."""
    return OntologyConfig()


@pytest.fixture
def house_workspace() -> dict[str, Any]:
    """A small saved workspace: one floor with a kitchen, and a board feeding a socket circuit."""
    return {
        "blocks": {
            "languageVersion": 0,
            "blocks": [
                {
                    "type": "dhc_floor",
                    "id": "floor-1",
                    "x": 50,
                    "y": 50,
                    "fields": {"LABEL": "Ground Floor", "LEVEL": 0},
                    "inputs": {
                        "HASSPACE": {
                            "block": {
                                "type": "dhc_space",
                                "id": "space-1",
                                "fields": {"LABEL": "Kitchen"},
                            }
                        }
                    },
                },
                {
                    "type": "dhc_distribution_board",
                    "id": "board-1",
                    "fields": {"LABEL": "Main Board"},
                    "inputs": {
                        "HASCIRCUIT": {
                            "block": {
                                "type": "dhc_circuit",
                                "id": "circuit-1",
                                "fields": {"LABEL": "Sockets kitchen"},
                                "inputs": {
                                    "FEEDSEQUIPMENT": {
                                        "block": {
                                            "type": "dhc_socket",
                                            "id": "socket-1",
                                            "next": {"block": {"type": "dhc_socket", "id": "socket-2"}},
                                        }
                                    },
                                    "HASPROTECTION": {
                                        "block": {
                                            "type": "dhc_protection_device",
                                            "id": "breaker-1",
                                            "fields": {"LABEL": "B16", "RATED_CURRENT": 16},
                                        }
                                    },
                                },
                            }
                        }
                    },
                },
            ],
        }
    }
