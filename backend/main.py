"""Location points service: FastAPI backend."""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.locations import router as locations_router
from api.routes import router
from location_core.store import LocationStore
from utils.config import HOST, LOG_LEVEL, PORT, SEED_ON_STARTUP

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

LOG = logging.getLogger(__name__)


def create_app(store: Optional[LocationStore] = None) -> FastAPI:
    """Build the app around the given store (a new seeded store by default)."""
    if store is None:
        store = LocationStore.with_seed() if SEED_ON_STARTUP else LocationStore()

    app = FastAPI(
        title="Location Points",
        description="CRUD service for named geographic points",
        version="0.1.0",
    )
    app.state.location_store = store

    # Any origin may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")
    app.include_router(locations_router, prefix="/api")

    @app.get("/")
    def root() -> dict:
        """Root redirect/info."""
        return {"service": "location-points", "docs": "/docs", "health": "/api/health"}

    LOG.info("Location store ready with %d locations", len(store))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
