"""ObjectTable — identifier allocator and identifier -> Reference table.

Identifiers are handed out as ``count() + 1``. The table keeps a separate
list of identifiers in registration order; iteration follows that list, so
a renderer emits objects in the order they were created.

Payloads are stored as given: a dict passed to ``allocate`` is the same
object as ``reference.data``, so every holder sees the same mutations.
No I/O happens here.
"""

from __future__ import annotations

import logging
from typing import Iterator, overload

from xrefstore.reference import Reference

logger = logging.getLogger("xrefstore.table")


class ObjectTable:
    """Allocator and table of indirect objects."""

    def __init__(self) -> None:
        self._objects: dict[int, Reference] = {}
        self._identifiers: list[int] = []

    def allocate(self, data: object = None) -> Reference:
        """Wrap data into a new Reference with the next identifier."""
        reference = Reference(self.count() + 1, data)
        logger.debug("allocated object %d", reference.identifier)
        return self.register(reference)

    ref = allocate

    def register(self, reference: Reference) -> Reference:
        """Add an already built Reference and return it.

        An entry with the same identifier is overwritten in the table, but
        the identifier is recorded again in the order list, so it is yielded
        twice by iteration and counted twice.
        """
        if reference.identifier in self._objects:
            logger.debug("object %d re-registered", reference.identifier)
        self._objects[reference.identifier] = reference
        self._identifiers.append(reference.identifier)
        return reference

    @overload
    def push(self, reference: Reference) -> Reference: ...

    @overload
    def push(self, identifier: int, data: object) -> Reference: ...

    def push(self, *args) -> Reference:
        """Register a Reference, or build one from ``(identifier, data)``."""
        if len(args) == 1 and isinstance(args[0], Reference):
            return self.register(args[0])
        if len(args) == 2:
            return self.register(Reference(*args))
        raise TypeError("push() takes a Reference or an (identifier, data) pair")

    __lshift__ = register

    def lookup(self, identifier: int) -> Reference | None:
        """The Reference registered under identifier, or None."""
        return self._objects.get(identifier)

    def __getitem__(self, identifier: int) -> Reference | None:
        return self._objects.get(identifier)

    def __contains__(self, identifier: int) -> bool:
        return identifier in self._objects

    def count(self) -> int:
        """Number of registrations (length of the order list)."""
        return len(self._identifiers)

    @property
    def size(self) -> int:
        return len(self._identifiers)

    length = size

    def __len__(self) -> int:
        return len(self._identifiers)

    def iterate(self) -> Iterator[Reference]:
        """Yield References in registration order.

        Each call starts a fresh pass over the order list as it stands now.
        """
        for identifier in tuple(self._identifiers):
            yield self._objects[identifier]

    def __iter__(self) -> Iterator[Reference]:
        return self.iterate()

    def close(self) -> None:
        """Drop every Reference. The table is empty afterwards."""
        logger.debug("closed table with %d objects", len(self._identifiers))
        self._objects.clear()
        self._identifiers.clear()

    def __enter__(self) -> ObjectTable:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
