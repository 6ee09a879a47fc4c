from __future__ import annotations

from fastapi import FastAPI

from dhc_abox.api.routes.designs import router as designs_router
from dhc_abox.api.routes.health import router as health_router
from dhc_abox.core.config import OntologyConfig, load_config


def create_app(config: OntologyConfig | None = None) -> FastAPI:
    app = FastAPI(
        title="DHC A-Box API",
        description="Compile block designs into ontology instances and check them against NF C 15-100.",
        version="0.1.0",
    )
    app.state.config = config if config is not None else load_config()

    app.include_router(health_router, include_in_schema=False)
    app.include_router(designs_router)

    return app
