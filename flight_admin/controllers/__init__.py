"""FastAPI routers acting as controllers in the MVC architecture."""

from . import flights, users

__all__ = ["flights", "users"]
