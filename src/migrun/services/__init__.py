"""Service layer for migrun."""

from .container import ServiceContainer

__all__ = ["ServiceContainer"]
