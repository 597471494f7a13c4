"""ASGI entry point for the custom quote service."""

from src.application import create_app

app = create_app()

__all__ = ["app"]
