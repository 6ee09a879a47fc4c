"""SmartHome design identifiers: ``{country}-{zip}-{street}{house}-{nn}``, e.g. ``DE-80331-MAR12-01``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dhc_abox.core.errors import InvalidDesignIdError

_DESIGN_ID_RE = re.compile(r"^([A-Z]{2})-(\d{3,5})-([A-Z]{3})(\d{1,5})-(\d{2})$")


@dataclass(frozen=True)
class DesignId:
    country: str
    zip: str
    street_code: str
    house_number: str
    suffix: str


def parse_design_id(value: str) -> DesignId | None:
    match = _DESIGN_ID_RE.match(value.strip().upper())
    if match is None:
        return None
    return DesignId(*match.groups())


def validate_design_id(value: str | None) -> str:
    """Return the normalized (upper-case, trimmed) id or raise ``InvalidDesignIdError``."""
    if not value or not value.strip():
        raise InvalidDesignIdError("Design ID is required.")
    normalized = value.strip().upper()
    if parse_design_id(normalized) is None:
        raise InvalidDesignIdError(
            f"Invalid design ID '{value}'. Expected: CC-ZIPCODE-STR##-NN (e.g. DE-80331-MAR12-01)"
        )
    return normalized
