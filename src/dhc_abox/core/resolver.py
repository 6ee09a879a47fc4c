from dhc_abox.core.config import OntologyConfig


def _pascal_case(local_name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in local_name.split("_"))


def _camel_case(field_name: str) -> str:
    parts = field_name.lower().split("_")
    return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


def local_name(qualified: str) -> str:
    return qualified.split(":", 1)[-1]


class Resolver:
    """Map block types, field names and slot names onto ontology terms."""

    def __init__(self, config: OntologyConfig) -> None:
        self._config = config

    def module_of(self, node_type: str) -> str | None:
        """Namespace prefix of the module owning ``node_type``, if any."""
        for type_prefix, namespace in self._config.modules.items():
            if node_type.startswith(type_prefix):
                return namespace
        return None

    def class_of(self, node_type: str) -> str | None:
        config = self._config
        if not config.is_managed(node_type):
            return None
        curated = config.classes.get(node_type)
        if curated is not None:
            return curated
        for type_prefix, namespace in config.modules.items():
            if node_type.startswith(type_prefix):
                return f"{namespace}:{_pascal_case(node_type[len(type_prefix) :])}"
        return f"{config.default_prefix}:{_pascal_case(node_type[len(config.type_prefix) :])}"

    def property_of(self, field_name: str) -> str:
        if field_name == "LABEL":
            return self._config.label_property
        return f"{self._config.default_prefix}:{_camel_case(field_name)}"

    def relation_property_of(self, slot: str) -> str:
        # Unknown slots only get their first character lower-cased.
        name = self._config.relations.get(slot) or slot[:1].lower() + slot[1:]
        return f"{self._config.default_prefix}:{name}"

    def iri(self, root_id: str, node_type: str, node_id: str) -> str:
        return f"{self._config.instance_prefix}:{root_id}/{node_type}/{node_id}"

    def design_view_of(self, node_type: str) -> str:
        if self.module_of(node_type) is not None:
            return "electrical"
        if any(pattern in node_type for pattern in self._config.spatial_patterns):
            return "spatial"
        if any(pattern in node_type for pattern in self._config.electrical_patterns):
            return "electrical"
        return "shared"
