"""Factory for the symbol directory used by renderers and cref lookups."""

from collections.abc import Iterable
from xml.sax.saxutils import quoteattr

from docextract.documented_symbol import DocumentedSymbol
from docextract.known_types import KNOWN_TYPES, strip_kind_prefix
from docextract.symbol_directory import SymbolDirectory

NULL_KEY = "(null)"
OVERLOAD_SEPARATOR = "~"


def derive_alternate_key(key: str) -> str | None:
    """Return the part of a compound id before '~', or None if there is none."""
    if OVERLOAD_SEPARATOR in key:
        return key.split(OVERLOAD_SEPARATOR, 1)[0]
    return None


def create_stub_symbol(
    key: str | None, known_types: dict[str, str] | None = None
) -> DocumentedSymbol:
    """Make up a symbol for an id that matches no documented declaration."""
    if key is None:
        key = NULL_KEY

    name = strip_kind_prefix(key)
    return DocumentedSymbol(
        documentation_id=key,
        documentation_xml=f"<member name={quoteattr(key)}><summary></summary></member>",
        symbol=None,
        container_id=None,
        display_name=(known_types or KNOWN_TYPES).get(name, name),
        full_display_name=name,
        anchor=None,
    )


def create_symbol_directory(
    symbols: Iterable[DocumentedSymbol], known_types: dict[str, str] | None = None
) -> SymbolDirectory:
    """Build a directory over documented symbols; the first symbol per id wins."""
    entries: dict[str, DocumentedSymbol] = {}
    for symbol in symbols:
        entries.setdefault(symbol.documentation_id, symbol)

    return SymbolDirectory(
        entries,
        fallback_provider=lambda key: create_stub_symbol(key, known_types),
        alternate_key_provider=derive_alternate_key,
    )
