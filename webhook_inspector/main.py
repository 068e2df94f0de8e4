import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from webhook_inspector.api import webhooks
from webhook_inspector.core.config import Settings
from webhook_inspector.core.security import SecretError
from webhook_inspector.core.store import WebhookStore
from webhook_inspector.models.schemas import HealthResponse

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)8s | %(name)s | %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Server running on :{settings.port}")
    if settings.secret_generated:
        logger.warning(
            f"WEBHOOK_SECRET not set, generated one. Access the received webhooks through "
            f"http://localhost:{settings.port}/?secret={settings.secret}"
        )
    else:
        logger.info(f"Access the received webhooks through http://localhost:{settings.port}/?secret=<WEBHOOK_SECRET>")
    yield
    logger.info(f"Shutting down, discarding {app.state.store.count()} stored webhooks")


async def secret_error_handler(request: Request, exc: SecretError):
    return PlainTextResponse(exc.message, status_code=401)


def create_app(settings: Optional[Settings] = None, store: Optional[WebhookStore] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(
        title="Webhook Inspector",
        version="1.0.0",
        description="Catch JSON webhook deliveries in memory and inspect the latest ones.",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store if store is not None else WebhookStore()
    app.add_exception_handler(SecretError, secret_error_handler)
    app.include_router(webhooks.router)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse()

    return app


app = create_app()


def run():
    settings: Settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
