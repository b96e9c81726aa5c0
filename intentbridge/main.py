# Role: FastAPI app bootstrap. Loads environment config early, configures logging, owns the lifecycle of the
# shared Dialogflow client, registers the relay router, and exposes a health endpoint.

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

import intentbridge.config
intentbridge.config.load_env()

from intentbridge.api.relay import router as relay_router
from intentbridge.config import Settings, get_settings
from intentbridge.nlu.dialogflow_client import DialogflowIntentClient

logger = logging.getLogger(__name__)


def resolve_log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    level = getattr(logging, settings.log_level, logging.INFO)
    # LOG_LEVEL may name a non-level attribute of the logging module (e.g. "Logger").
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings) -> None:
    level = resolve_log_level(settings)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # gRPC and auth libraries are chatty at DEBUG and may echo credentials/headers.
    for name in ("grpc", "google.auth", "google.api_core", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    intent_client: Optional[DialogflowIntentClient] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Key line: one client per process, reused by every request.
        client = intent_client or DialogflowIntentClient(
            project_id=settings.project_id,
            credentials_path=settings.credentials_path,
        )
        app.state.intent_client = client
        logger.info("Dialogflow client ready for project %s", client.project_id)
        try:
            yield
        finally:
            # Injected clients belong to the caller.
            if intent_client is None:
                await client.close()

    app = FastAPI(title="Intent Bridge API", version="0.1.0", lifespan=lifespan)
    app.include_router(relay_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run("intentbridge.main:app", host=settings.host, port=settings.port, reload=settings.debug)
