from dhc_abox.validation.rules.cross_section import check_cross_section
from dhc_abox.validation.rules.delivery_chain import check_delivery_chain
from dhc_abox.validation.rules.max_points import check_max_points
from dhc_abox.validation.rules.protection_sizing import check_protection_sizing

__all__ = [
    "check_cross_section",
    "check_delivery_chain",
    "check_max_points",
    "check_protection_sizing",
]
