"""xrefstore: indirect object store for page-based document generation."""

from importlib.metadata import version as _version

__version__ = _version("xrefstore")

from xrefstore.syntax import Name, LiteralString, is_value
from xrefstore.stream import Stream
from xrefstore.reference import Reference
from xrefstore.table import ObjectTable
from xrefstore.options import PrintScaling, StoreOptions
from xrefstore.resources import DirectoryResourceReader, PackageResourceReader
from xrefstore.xmp import XmpMetadata
from xrefstore.store import ObjectStore
from xrefstore.errors import ResourceReadError, StreamAttachError, XrefStoreError

__all__ = [
    "Name",
    "LiteralString",
    "is_value",
    "Stream",
    "Reference",
    "ObjectTable",
    "PrintScaling",
    "StoreOptions",
    "DirectoryResourceReader",
    "PackageResourceReader",
    "XmpMetadata",
    "ObjectStore",
    "ResourceReadError",
    "StreamAttachError",
    "XrefStoreError",
]
