"""Construction options for ObjectStore."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrintScaling(Enum):
    """Viewer print-scaling preference."""

    NONE = "none"
    DEFAULT = "default"

    @classmethod
    def coerce(cls, value: PrintScaling | str | None) -> PrintScaling:
        """Accept a member, its string value (any case) or None (DEFAULT)."""
        if value is None:
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")


@dataclass
class StoreOptions:
    """Options for the well-known object bootstrap.

    ``info`` is passed through untouched: it becomes the info object's data
    and seeds the XMP metadata when ``enable_pdfa_1b`` is set.
    """

    info: dict = field(default_factory=dict)
    print_scaling: PrintScaling = PrintScaling.DEFAULT
    enable_pdfa_1b: bool = False

    def __post_init__(self) -> None:
        self.print_scaling = PrintScaling.coerce(self.print_scaling)
        if self.info is None:
            self.info = {}
