"""API route registrations."""

from interfaces.api.routes.thumbnail_routes import router as thumbnail_router

__all__ = ["thumbnail_router"]
