from fastapi import Request

from dhc_abox.core.config import OntologyConfig


def get_config(request: Request) -> OntologyConfig:
    """Return the configuration the application was created with."""
    config: OntologyConfig = request.app.state.config
    return config
