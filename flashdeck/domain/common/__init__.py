"""
Domain common module.

Contains base classes for domain modeling:
- EntityId: Immutable, non-blank string identifiers
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
]
