"""Append-only binary payload attached to a Reference.

Chunks are appended in order and joined lazily. Text chunks are UTF-8
encoded. Filtering and compression belong to the renderer; a Stream only
guarantees its content and order.
"""

from __future__ import annotations

from typing import Union

Chunk = Union[bytes, bytearray, memoryview, str]


class Stream:
    """Binary content of a stream object."""

    __slots__ = ("_chunks", "_joined", "dictionary")

    def __init__(self, dictionary: dict | None = None) -> None:
        self._chunks: list[bytes] = []
        self._joined: bytes | None = b""
        # stream dictionary entries (Filter, DecodeParms, ...) set by the renderer
        self.dictionary = dictionary if dictionary is not None else {}

    def append(self, chunk: Chunk) -> Stream:
        """Append a chunk. Returns self so appends can be chained."""
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        elif isinstance(chunk, (bytearray, memoryview)):
            chunk = bytes(chunk)
        elif not isinstance(chunk, bytes):
            raise TypeError(
                f"stream chunks must be bytes or str, not {type(chunk).__name__}"
            )
        self._chunks.append(chunk)
        self._joined = None
        return self

    __lshift__ = append

    @property
    def data(self) -> bytes:
        if self._joined is None:
            self._joined = b"".join(self._chunks)
            self._chunks = [self._joined] if self._joined else []
        return self._joined

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def empty(self) -> bool:
        return not any(self._chunks)

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        # an attached stream is truthy even when empty
        return True

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"Stream(length={self.length})"
