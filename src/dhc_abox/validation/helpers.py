from collections.abc import Callable

from dhc_abox.core.graph import DesignGraph
from dhc_abox.models import Violation

Rule = Callable[[DesignGraph], list[Violation]]


def format_number(value: float) -> str:
    """Render 16.0 as ``16`` and 1.5 as ``1.5``."""
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)
