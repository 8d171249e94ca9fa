"""Checkbox identifier generation.

Identifiers are short random strings that must not already occur anywhere in
the document. Uniqueness is checked by a literal substring scan of the whole
page on every attempt; documents are small and collisions rare.

The first candidate is the last six characters of a random UUID. A collision
falls back to full 36-character UUIDs, which do not collide in practice.

Nothing is reserved in the document itself. Code that issues several
identifiers before writing any of them (bulk conversion) must use an
IdAllocator so that identifiers from the same batch are also kept distinct.

Note:
    The substring scan also counts text that is not a checkbox id, for
    example a URL that happens to contain the candidate. Such a hit only
    costs a regeneration.

"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Collection

DEFAULT_ID_LENGTH = 6


def _random_uuid() -> str:
    return str(uuid.uuid4())


def id_exists_in_page(checkbox_id: str, page: str) -> bool:
    """Check whether ``checkbox_id`` occurs anywhere in ``page``."""
    return checkbox_id in page


def generate_unique_id(
    page: str,
    *,
    length: int = DEFAULT_ID_LENGTH,
    reserved: Collection[str] = (),
    source: Callable[[], str] = _random_uuid,
) -> str:
    """Generate an identifier that does not occur in ``page``.

    Args:
        page: Full document text to check against
        length: Length of the first, short candidate
        reserved: Identifiers already issued but not yet written
        source: Random string factory (UUID4 by default)

    Returns:
        An identifier absent from ``page`` and ``reserved``.

    Example:
        >>> len(generate_unique_id("no ids here"))
        6

    """
    candidate = source()[-length:]
    while candidate in reserved or id_exists_in_page(candidate, page):
        candidate = source()
    return candidate


class IdAllocator:
    """Issues identifiers that are unique within one batch.

    Every identifier returned by ``allocate`` is remembered, so later calls
    never hand it out again even though it has not reached the document yet.

    Example:
        >>> allocator = IdAllocator()
        >>> a = allocator.allocate("page")
        >>> b = allocator.allocate("page")
        >>> a != b
        True

    """

    __slots__ = ("_issued", "_length", "_source")

    def __init__(
        self,
        *,
        length: int = DEFAULT_ID_LENGTH,
        source: Callable[[], str] = _random_uuid,
    ) -> None:
        self._issued: set[str] = set()
        self._length = length
        self._source = source

    @property
    def issued(self) -> frozenset[str]:
        """Identifiers handed out so far."""
        return frozenset(self._issued)

    def allocate(self, page: str) -> str:
        """Return a fresh identifier absent from ``page`` and this batch."""
        checkbox_id = generate_unique_id(
            page,
            length=self._length,
            reserved=self._issued,
            source=self._source,
        )
        self._issued.add(checkbox_id)
        return checkbox_id

    def allocate_many(self, page: str, count: int) -> list[str]:
        """Return ``count`` fresh identifiers, pairwise distinct."""
        return [self.allocate(page) for _ in range(count)]


__all__ = [
    "DEFAULT_ID_LENGTH",
    "IdAllocator",
    "generate_unique_id",
    "id_exists_in_page",
]
