"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId
from .value_object import ValueObject

__all__ = [
    "Entity",
    "EntityId",
    "ValueObject",
]
