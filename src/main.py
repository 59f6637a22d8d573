from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src.core.config import config
from src.core.context import RelayContext
from src.core.models import EventType
from src.core.utils.logging import configure_logging
from src.event_processors.sponsorship import SponsorshipProcessor
from src.webhooks.dispatcher import WebhookDispatcher
from src.webhooks.handlers.ping import PingEventHandler
from src.webhooks.handlers.sponsorship import SponsorshipEventHandler
from src.webhooks.router import router as webhook_router

logger = structlog.get_logger()


def build_dispatcher(context: RelayContext) -> WebhookDispatcher:
    """Register the sponsorship and ping handlers against a fresh dispatcher."""
    dispatcher = WebhookDispatcher()
    processor = SponsorshipProcessor.from_context(context)
    dispatcher.register_handler(processor.get_event_type(), SponsorshipEventHandler(processor))
    dispatcher.register_handler(EventType.PING, PingEventHandler())
    return dispatcher


def install_context(app: FastAPI, context: RelayContext) -> None:
    app.state.relay_context = context
    app.state.dispatcher = build_dispatcher(context)


# --- Application Lifecycle ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and, unless one was injected, build the relay context from the environment."""
    configure_logging(config.logging)

    if getattr(app.state, "relay_context", None) is None:
        # Missing secrets raise here and abort startup.
        install_context(app, RelayContext.from_config(config))

    logger.info("relay_started", environment=config.environment)
    yield
    logger.info("relay_stopped")


# --- Application Setup ---


def create_app(context: RelayContext | None = None) -> FastAPI:
    app = FastAPI(
        title="Sponsors Relay",
        description="Relays GitHub Sponsors webhooks to Slack.",
        version="0.1.0",
        lifespan=lifespan,
    )

    if context is not None:
        install_context(app, context)

    app.include_router(webhook_router, prefix="/webhooks", tags=["GitHub Webhooks"])

    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the service is running."""
        return {"status": "ok", "message": "Sponsors relay is running."}

    return app


app = create_app()
