"""
Main entrypoint for the Bank API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn bank_api.app.main:app --port 9090

Each application owns exactly one ``PaymentLedger``, created empty
when the app is built and stored on ``app.state.ledger``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.error_handlers import register_exception_handlers
from .core.logging_config import setup_logging
from .services.payment_service import PaymentLedger


def create_app(ledger: Optional[PaymentLedger] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    ledger : Optional[PaymentLedger]
        Ledger to serve.  A fresh, empty ledger using the configured
        acceptance token is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.ledger = ledger if ledger is not None else PaymentLedger(settings.acceptance_token)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
