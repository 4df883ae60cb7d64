"""Exceptions raised by xrefstore."""


class XrefStoreError(Exception):
    """Base class for all xrefstore errors."""


class ResourceReadError(XrefStoreError):
    """A bundled resource is missing or unreadable."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        message = f"could not read resource {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class StreamAttachError(XrefStoreError):
    """Stream content was added to an object that cannot carry a stream."""
