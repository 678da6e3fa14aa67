"""Logic for writing the merged documentation of all assemblies as XML."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from lxml import etree

from docextract.documented_symbol import DocumentedSymbol

logger = logging.getLogger(__name__)


def build_xml_output(
    assembly_symbols: Mapping[str, Sequence[DocumentedSymbol]],
) -> etree._Element:
    """Combine every assembly's members into one <doc> document."""
    doc = etree.Element("doc")
    for assembly_name, symbols in assembly_symbols.items():
        assembly = etree.SubElement(doc, "assembly")
        etree.SubElement(assembly, "name").text = assembly_name
        members = etree.SubElement(assembly, "members")
        for symbol in symbols:
            element = symbol.documentation()
            if element is None:
                logger.warning(
                    "Skipping %s: documentation is empty or malformed",
                    symbol.documentation_id,
                )
                continue
            members.append(element)
    return doc


def write_xml_output(
    assembly_symbols: Mapping[str, Sequence[DocumentedSymbol]], path: Path
) -> None:
    """Write the combined documentation XML to a file."""
    doc = build_xml_output(assembly_symbols)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(
        etree.tostring(doc, encoding="utf-8", xml_declaration=True, pretty_print=True)
    )
