"""XMP metadata formatter for the document metadata stream.

Builds an xpacket-wrapped ``x:xmpmeta`` document from the info dictionary.
With PDF/A-1b enabled, a ``pdfaid`` identification (part 1, conformance B)
is included.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from html import escape as _html_escape
from typing import Any, Mapping

XPACKET_ID = "W5M0MpCehiHzreSzNTczkc9d"


def _esc(value: Any) -> str:
    """XML-escape text for attributes and text nodes."""
    text = "" if value is None else _html_escape(str(value), quote=True)
    return text.replace("'", "&apos;")


def _xmp_date(value: Any) -> str | None:
    # XMP dates are ISO 8601, e.g. 2025-09-01T12:34:56+02:00
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    return None


def _as_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(v) for v in value]
    return [str(value)]


class XmpMetadata:
    """Renders XMP metadata from an info mapping."""

    def __init__(self, info: Mapping[str, Any] | None = None) -> None:
        self.info = info if info is not None else {}
        self.enable_pdfa_1b = False

    def _get(self, key: str) -> Any:
        return self.info.get(key)

    def render(self) -> bytes:
        title = self._get("Title")
        subject = self._get("Subject")
        authors = _as_list(self._get("Author"))
        keywords = _as_list(self._get("Keywords"))
        creator_tool = self._get("Creator")
        producer = self._get("Producer")
        create_date = _xmp_date(self._get("CreationDate"))
        modify_date = _xmp_date(self._get("ModDate")) or create_date

        parts = [
            f'<?xpacket begin="{chr(0xFEFF)}" id="{XPACKET_ID}"?>',
            '<x:xmpmeta xmlns:x="adobe:ns:meta/">',
            "  <rdf:RDF",
            '    xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"',
            '    xmlns:dc="http://purl.org/dc/elements/1.1/"',
            '    xmlns:xmp="http://ns.adobe.com/xap/1.0/"',
            '    xmlns:pdf="http://ns.adobe.com/pdf/1.3/"',
            '    xmlns:pdfaid="http://www.aiim.org/pdfa/ns/id/">',
            '    <rdf:Description rdf:about=""',
        ]
        if creator_tool:
            parts.append(f'        xmp:CreatorTool="{_esc(creator_tool)}"')
        if create_date:
            parts.append(f'        xmp:CreateDate="{_esc(create_date)}"')
        if modify_date:
            parts.append(f'        xmp:ModifyDate="{_esc(modify_date)}"')
            parts.append(f'        xmp:MetadataDate="{_esc(modify_date)}"')
        if producer:
            parts.append(f'        pdf:Producer="{_esc(producer)}"')
        if keywords:
            parts.append(f'        pdf:Keywords="{_esc(", ".join(keywords))}"')
        parts.append("      >")
        if self.enable_pdfa_1b:
            parts.append("      <pdfaid:part>1</pdfaid:part>")
            parts.append("      <pdfaid:conformance>B</pdfaid:conformance>")
        if title:
            parts += [
                "      <dc:title><rdf:Alt>",
                f'        <rdf:li xml:lang="x-default">{_esc(title)}</rdf:li>',
                "      </rdf:Alt></dc:title>",
            ]
        if subject:
            parts += [
                "      <dc:description><rdf:Alt>",
                f'        <rdf:li xml:lang="x-default">{_esc(subject)}</rdf:li>',
                "      </rdf:Alt></dc:description>",
            ]
        if authors:
            parts.append("      <dc:creator><rdf:Seq>")
            parts += [f"        <rdf:li>{_esc(a)}</rdf:li>" for a in authors]
            parts.append("      </rdf:Seq></dc:creator>")
        parts += [
            "    </rdf:Description>",
            "  </rdf:RDF>",
            "</x:xmpmeta>",
            '<?xpacket end="w"?>',
            "",
        ]
        return "\n".join(parts).encode("utf-8")


def render_xmp(info: Mapping[str, Any] | None, enable_pdfa_1b: bool) -> bytes:
    """Default metadata formatter used by ObjectStore."""
    metadata = XmpMetadata(info)
    metadata.enable_pdfa_1b = enable_pdfa_1b
    return metadata.render()
