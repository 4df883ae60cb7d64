"""Reference — the addressable unit of the object store.

A Reference pairs an immutable identifier with mutable payload data and,
optionally, a Stream. Elsewhere in the document graph it is written as an
indirect reference ("12 0 R") instead of being inlined.
"""

from __future__ import annotations

from collections.abc import Mapping

from xrefstore.errors import StreamAttachError
from xrefstore.stream import Chunk, Stream


class Reference:
    """An indirect object: identifier + data + optional stream."""

    __slots__ = ("_identifier", "gen", "data", "stream", "offset")

    def __init__(self, identifier: int, data: object = None) -> None:
        self._identifier = identifier
        self.gen = 0
        self.data = data
        self.stream: Stream | None = None
        # byte offset in the output, filled in by the renderer
        self.offset: int | None = None

    @property
    def identifier(self) -> int:
        return self._identifier

    def _check_stream_capable(self) -> None:
        if not isinstance(self.data, Mapping):
            raise StreamAttachError(
                f"cannot attach a stream to non-dictionary object {self.identifier}"
            )

    def attach_stream(self, stream: Stream | None = None) -> Stream:
        """Attach a stream and return it.

        Attaching when a stream is already present returns the existing
        stream; passing a different Stream at that point is an error.
        """
        self._check_stream_capable()
        if self.stream is not None:
            if stream is not None and stream is not self.stream:
                raise StreamAttachError(
                    f"object {self.identifier} already owns a stream"
                )
            return self.stream
        self.stream = stream if stream is not None else Stream()
        return self.stream

    def append(self, chunk: Chunk) -> Reference:
        """Append content to the stream, attaching one on first use."""
        self.attach_stream().append(chunk)
        return self

    __lshift__ = append

    def __str__(self) -> str:
        return f"{self.identifier} {self.gen} R"

    def __repr__(self) -> str:
        # data is left out: the object graph may be cyclic
        suffix = f", stream={self.stream!r}" if self.stream is not None else ""
        return f"Reference({self.identifier}{suffix})"
