"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from fitlog.api.nutrition import router as nutrition_router
from fitlog.api.workouts import router as workouts_router
from fitlog.app_logging import configure_logging
from fitlog.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="FitLog")
    app.state.container = container

    app.include_router(nutrition_router)
    app.include_router(workouts_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info("FitLog API ready (environment=%s)", container.settings.environment)
    return app
