"""
    Identifier allocation - monotonic, never-reused integer ids.
"""
from typing import Optional

from ..exceptions import IdentifierExhausted


class IdAllocator:
    """
    Issues unique integer identifiers for one namespace.

    Identifiers only ever grow. An id handed out once is retired for good,
    even if the entity it named is deleted and later restored.
    """

    def __init__(self, namespace: str, start: int = 0, limit: Optional[int] = None):
        """
        Args:
            namespace: Name used in error messages ("node" or "edge").
            start:     First identifier to issue.
            limit:     Exclusive upper bound. ``None`` means unbounded.
        """
        if start < 0:
            raise ValueError(f"Identifier start must be non-negative, got {start}")
        self.namespace = namespace
        self._next = start
        self._limit = limit
        self._check_limit(start)

    @property
    def next_value(self) -> int:
        """The id the next call to ``next()`` will return."""
        return self._next

    def next(self) -> int:
        """Issue a fresh identifier."""
        self._check_limit(self._next)
        identifier = self._next
        self._next += 1
        return identifier

    def advance_past(self, identifier: int) -> None:
        """Make sure ``identifier`` can never be issued from now on."""
        if identifier >= self._next:
            self._check_limit(identifier)
            self._next = identifier + 1

    def _check_limit(self, identifier: int) -> None:
        if self._limit is not None and identifier >= self._limit:
            raise IdentifierExhausted(
                f"{self.namespace.capitalize()} identifier space exhausted "
                f"(limit {self._limit})."
            )

    def __repr__(self) -> str:
        return f"IdAllocator({self.namespace}, next={self._next})"
