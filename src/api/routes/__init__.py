"""API route registration."""

from fastapi import FastAPI

from src.api.routes import quote, system, webhooks


def include_api_routes(app: FastAPI) -> None:
    """Attach all API routers to the application."""

    app.include_router(system.router)
    app.include_router(quote.router)
    app.include_router(webhooks.router)
