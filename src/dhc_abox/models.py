import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FieldValue = str | int | float | bool
RelationKind = Literal["containment", "reference"]
AttributeKind = Literal["numeric", "boolean", "string"]
Severity = Literal["error", "warning"]


def to_number(value: FieldValue | None) -> float | None:
    """Parse a field value as a finite number, or return None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int | float)):
        return float(value) if math.isfinite(value) else None
    text = value.strip()
    # float() also accepts digit separators such as "1_000".
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class Node(BaseModel):
    id: str
    type: str
    fields: dict[str, FieldValue] = {}
    containment: dict[str, list["Node"]] = {}
    references: dict[str, "Node"] = {}
    slot_order: list[str] = []

    def slots(self) -> list[tuple[str, RelationKind, list["Node"]]]:
        """Connected slots in declared order.

        Slots missing from ``slot_order`` follow it, containment before references.
        """
        names = [name for name in self.slot_order if name in self.containment or name in self.references]
        names.extend(name for name in self.containment if name not in names)
        names.extend(name for name in self.references if name not in names)

        result: list[tuple[str, RelationKind, list[Node]]] = []
        for name in names:
            if name in self.containment:
                result.append((name, "containment", self.containment[name]))
            else:
                result.append((name, "reference", [self.references[name]]))
        return result

    def field(self, name: str) -> FieldValue | None:
        return self.fields.get(name)

    def number(self, name: str) -> float | None:
        return to_number(self.fields.get(name))

    def children(self, slot: str) -> list["Node"]:
        return self.containment.get(slot, [])

    def reference(self, slot: str) -> "Node | None":
        return self.references.get(slot)

    @property
    def label(self) -> str:
        """LABEL field, or the type's local name with spaces."""
        value = self.fields.get("LABEL")
        if value not in (None, ""):
            return str(value)
        return self.type.replace("dhc_", "", 1).replace("_", " ")


Node.model_rebuild()  # necessary for recursive types


class Attribute(BaseModel):
    property: str
    value: FieldValue
    kind: AttributeKind


class Relation(BaseModel):
    property: str
    target: str
    kind: RelationKind


class InstanceRecord(BaseModel):
    iri: str
    node_id: str
    node_type: str
    class_name: str
    label: str
    attributes: list[Attribute] = []
    relations: list[Relation] = []
    properties: dict[str, FieldValue] = {}


class Violation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    severity: Severity
    message: str
    node_id: str = Field(alias="nodeId")
    rule_id: str = Field(alias="ruleId")
