"""
Sequential identifier allocation for people.
"""

import logging


logger = logging.getLogger(__name__)


class IdentityAllocator:
    """Hands out strictly increasing integer identifiers.

    Identifiers are never reused. Each allocator is independent, so a
    private allocator gives deterministic ids in isolation while
    ``DEFAULT_ALLOCATOR`` is shared by everything that does not pass one.
    """
    
    def __init__(self, start: int = 1):
        self._next_id = start
    
    @property
    def peek(self) -> int:
        """The identifier the next call to ``next_id`` will return."""
        return self._next_id
    
    def next_id(self) -> int:
        allocated = self._next_id
        self._next_id += 1
        logger.debug(f"Allocated person id {allocated}")
        return allocated


DEFAULT_ALLOCATOR = IdentityAllocator()
