"""Shared domain building blocks."""

from .entity import Entity, EntityId

__all__ = ["Entity", "EntityId"]
