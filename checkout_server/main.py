import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkout_server.api.api import router as api_router
from checkout_server.core.config import Settings
from checkout_server.core.errors import register_exception_handlers
from checkout_server.core.logging import setup_logging
from checkout_server.services.payments import PaymentsProvider, get_payments_provider

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, provider: PaymentsProvider | None = None) -> FastAPI:
    """build the app around one settings object; tests pass fakes for both."""
    settings = settings or Settings()
    app = FastAPI(title="Razorpay Checkout Server", version="0.1.0")
    app.state.settings = settings
    app.state.payments_provider = provider or get_payments_provider(settings)

    # set up CORS so the checkout page can talk to us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    if not settings.razorpay_configured and app.state.payments_provider.name == "razorpay":
        logger.warning("RAZORPAY_KEY_ID/RAZORPAY_KEY_SECRET missing, order creation will fail")
    return app


def run() -> None:
    import uvicorn

    settings = Settings()
    setup_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info(f"Server running at http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
