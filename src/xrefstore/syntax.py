"""Scalar value kinds without a native Python counterpart.

Payload data is built from plain Python values: dict, list, int, float,
str, bool, datetime/date, None, plus the two kinds below and nested
References.
"""

from __future__ import annotations

from datetime import date, datetime

from xrefstore.reference import Reference


class Name(str):
    """A symbolic name, e.g. ``Name("Catalog")`` for ``/Catalog``.

    A leading slash is stripped so ``Name("/Catalog") == Name("Catalog")``.
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Name:
        if value.startswith("/"):
            value = value[1:]
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"


class LiteralString(str):
    """Text to be emitted as a literal (parenthesized) string."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"LiteralString({str(self)!r})"


_SCALARS = (int, float, str, bytes, datetime, date, type(None))


def is_value(value: object) -> bool:
    """True if value is one of the supported payload kinds.

    Each container is visited once, so cyclic payloads terminate.
    References are leaves: their own data is not walked.
    """
    seen: set[int] = set()
    pending = [value]
    while pending:
        item = pending.pop()
        if isinstance(item, Reference) or isinstance(item, _SCALARS):
            continue
        if not isinstance(item, (dict, list, tuple)):
            return False
        if id(item) in seen:
            continue
        seen.add(id(item))
        if isinstance(item, dict):
            if not all(isinstance(key, str) for key in item):
                return False
            pending.extend(item.values())
        else:
            pending.extend(item)
    return True
