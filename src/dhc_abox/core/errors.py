class DesignError(Exception):
    """Base class for errors reported to callers of the compile/validate pipelines."""


class MalformedGraphError(DesignError):
    """A node was reached twice while walking a design, so it is not a tree."""

    def __init__(self, node_id: str, node_type: str) -> None:
        super().__init__(f"Node {node_id} ({node_type}) is reachable more than once; the design is not a tree.")
        self.node_id = node_id
        self.node_type = node_type


class WorkspaceFormatError(DesignError, ValueError):
    pass


class InvalidDesignIdError(DesignError, ValueError):
    pass
