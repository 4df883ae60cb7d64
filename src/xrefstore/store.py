"""ObjectStore — the object table plus the document's well-known objects.

Construction bootstraps the objects every document needs: the info
dictionary, the catalog (root) and the page tree root. With PDF/A-1b
enabled it also adds an XMP metadata stream and an sRGB output intent.

Collaborators (metadata formatter, resource reader) are called before the
first allocation, so a failing bootstrap leaves nothing behind.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from xrefstore.options import PrintScaling, StoreOptions
from xrefstore.reference import Reference
from xrefstore.resources import ICC_PROFILE_NAME, PackageResourceReader, ResourceReader
from xrefstore.syntax import LiteralString, Name
from xrefstore.table import ObjectTable
from xrefstore.xmp import render_xmp

logger = logging.getLogger("xrefstore.store")

MetadataFormatter = Callable[[Any, bool], bytes]


class ObjectStore(ObjectTable):
    """Document object repository with well-known object accessors."""

    def __init__(
        self,
        info: Mapping[str, Any] | None = None,
        print_scaling: PrintScaling | str | None = None,
        enable_pdfa_1b: bool = False,
        *,
        resource_reader: ResourceReader | None = None,
        metadata_formatter: MetadataFormatter | None = None,
    ) -> None:
        options = StoreOptions(
            info=info if info is not None else {},
            print_scaling=print_scaling,
            enable_pdfa_1b=enable_pdfa_1b,
        )
        # External inputs first: nothing is allocated until these succeed.
        xmp_content = icc_profile = None
        if options.enable_pdfa_1b:
            formatter = metadata_formatter or render_xmp
            xmp_content = formatter(options.info, True)
            reader = resource_reader or PackageResourceReader()
            icc_profile = reader.read(ICC_PROFILE_NAME)

        super().__init__()
        self.options = options
        self._xmp_metadata: int | None = None
        self._bootstrap(xmp_content, icc_profile)

    @classmethod
    def from_options(cls, options: StoreOptions, **collaborators) -> ObjectStore:
        return cls(
            info=options.info,
            print_scaling=options.print_scaling,
            enable_pdfa_1b=options.enable_pdfa_1b,
            **collaborators,
        )

    def _bootstrap(self, xmp_content: bytes | None, icc_profile: bytes | None) -> None:
        self._info = self.allocate(self.options.info).identifier
        self._root = self.allocate({"Type": Name("Catalog")}).identifier

        if self.options.enable_pdfa_1b:
            # PDF/A-1b requirement: XMP metadata
            metadata = self.allocate({"Type": Name("Metadata"), "Subtype": Name("XML")})
            metadata.attach_stream().append(xmp_content)
            self._xmp_metadata = metadata.identifier
            self.root.data["Metadata"] = metadata

            # PDF/A-1b requirement: OutputIntent with ICC profile stream
            profile = self._add_output_intent(icc_profile)
            logger.info(
                "PDF/A-1b objects added: metadata %d, output intent profile %d",
                metadata.identifier,
                profile.identifier,
            )

        if self.options.print_scaling is PrintScaling.NONE:
            self.root.data["ViewerPreferences"] = {"PrintScaling": Name("None")}

        if self.root.data.get("Pages") is None:
            self.root.data["Pages"] = self.allocate(
                {"Type": Name("Pages"), "Count": 0, "Kids": []}
            )
        logger.debug("bootstrapped %d objects", self.count())

    def _add_output_intent(self, icc_profile: bytes) -> Reference:
        profile = self.allocate({"N": 3})
        profile.attach_stream().append(icc_profile)
        self.root.data["OutputIntents"] = [
            {
                "Type": Name("OutputIntent"),
                "S": Name("GTS_PDFA1"),
                "OutputConditionIdentifier": LiteralString("IEC sRGB"),
                "Info": LiteralString("IEC 61966-2.1 Default RGB colour space - sRGB"),
                "DestOutputProfile": profile,
            }
        ]
        return profile

    @property
    def info(self) -> Reference:
        """Document info dictionary."""
        return self.lookup(self._info)

    @property
    def root(self) -> Reference:
        """Document catalog."""
        return self.lookup(self._root)

    @property
    def xmp_metadata(self) -> Reference | None:
        """XMP metadata stream, or None unless PDF/A-1b is enabled."""
        if self._xmp_metadata is None:
            return None
        return self.lookup(self._xmp_metadata)

    @property
    def pages(self) -> Reference:
        """Page tree root."""
        return self.root.data["Pages"]

    @property
    def page_count(self) -> int:
        """The page tree's Count entry (not checked against Kids)."""
        return self.pages.data["Count"]

    def object_id_for_page(self, page: int) -> int | None:
        """Object identifier of a page.

        Positive page numbers start at 1. Zero and negative numbers index the
        flat Kids list directly, so ``-1`` is the last page. Out of range
        gives None.

            store.object_id_for_page(1)    # first page
            store.object_id_for_page(-1)   # last page
        """
        if page > 0:
            page -= 1
        page_ids = self._page_object_ids()
        try:
            return page_ids[page]
        except IndexError:
            return None

    def _page_object_ids(self) -> list[int]:
        return [kid.identifier for kid in self.pages.data["Kids"]]
