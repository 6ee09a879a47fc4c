"""NF C 14-100: completeness of the electrical delivery chain.

Only applies when a design uses NF C 14-100 module blocks. Presence is checked
anywhere in the design, not connectivity between the components.
"""

from dhc_abox.core.graph import DesignGraph
from dhc_abox.models import Violation

RULE_ID = "nfc14100-delivery-chain"
MODULE_PREFIX = "dhc_nfc14100_"

REQUIRED_COMPONENTS: tuple[tuple[str, str], ...] = (
    ("dhc_energy_delivery", "Energy Delivery block"),
    ("dhc_nfc14100_nf14_energy_meter", "NF14 Energy Meter"),
    ("dhc_nfc14100_nf14_emergency_disconnect", "NF14 Emergency Disconnect"),
    ("dhc_distribution_board", "Distribution Board"),
)


def check_delivery_chain(graph: DesignGraph) -> list[Violation]:
    module_nodes = graph.with_prefix(MODULE_PREFIX)
    if not module_nodes:
        return []

    anchor = module_nodes[0]
    return [
        Violation(
            severity="error",
            message=f"NFC 14-100 delivery chain incomplete: {description} is required.",
            node_id=anchor.id,
            rule_id=RULE_ID,
        )
        for node_type, description in REQUIRED_COMPONENTS
        if not graph.has_type(node_type)
    ]
