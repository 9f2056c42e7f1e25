"""Endpoint-specific convenience wrappers."""
from .objects import ObjectsResource
from .opengraph import Action, OpenGraphResource

__all__ = ["ObjectsResource", "OpenGraphResource", "Action"]
