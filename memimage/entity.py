"""
Entity base and identifier allocation.

Identifiers come from a monotonically increasing counter. They are
unique within one process run only; nothing is persisted and nothing
is reconciled across restarts.

Allocation is a plain, unguarded increment. Like every mutation in
memimage it assumes a single writer: whatever schedules commands
against the in-memory model is responsible for serializing them.
"""

from __future__ import annotations

import logging
from typing import Optional

from .domain_types import EntityId

logger = logging.getLogger(__name__)


class IdAllocator:
    """
    Hands out consecutive integer identifiers, starting at `start`.

    Not thread-safe. Share one allocator per single-writer context.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def next_id(self) -> EntityId:
        """Consume and return the next identifier."""
        allocated = self._next
        self._next += 1
        return EntityId(allocated)

    def peek(self) -> EntityId:
        """Return the identifier next_id() would hand out, without consuming it."""
        return EntityId(self._next)


# Process-wide allocator used when an entity is created without one.
DEFAULT_ALLOCATOR = IdAllocator()


def next_entity_id() -> EntityId:
    return DEFAULT_ALLOCATOR.next_id()


class Entity:
    """
    A domain object identified by an allocator-issued id.

    Two entities are equal when they share concrete type and id;
    field values play no part in identity.
    """

    def __init__(self, *, allocator: Optional[IdAllocator] = None):
        source = allocator if allocator is not None else DEFAULT_ALLOCATOR
        self._id = source.next_id()
        logger.debug("Allocated id %d for %s", self._id, type(self).__name__)

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self), self._id))
