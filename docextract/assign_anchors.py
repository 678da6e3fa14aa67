"""Logic for assigning unique anchors to documented symbols."""

from collections.abc import Sequence
from typing import Any

from docextract.documented_symbol import DocumentedSymbol
from docextract.symbol_model import SymbolModel


def anchor_for(model: SymbolModel, symbol: Any) -> str:
    """Join the names of a symbol and its containers, outermost first."""
    names: list[str] = []
    seen: set[int] = set()
    current = symbol
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        name = model.name(current)
        if name:
            names.append(name)
        current = model.containing_symbol(current)
    return ".".join(reversed(names)).lower()


def disambiguate_anchors(symbols: Sequence[DocumentedSymbol]) -> None:
    """Suffix '-1', '-2', ... onto every anchor shared by several symbols.

    Overloads and names differing only in case produce the same anchor;
    suffixes follow first-seen order.
    """
    groups: dict[str, list[DocumentedSymbol]] = {}
    for symbol in symbols:
        if symbol.anchor is not None:
            groups.setdefault(symbol.anchor, []).append(symbol)

    for group in groups.values():
        if len(group) > 1:
            for count, symbol in enumerate(group, start=1):
                symbol.anchor = f"{symbol.anchor}-{count}"


def assign_anchors(model: SymbolModel, symbols: Sequence[DocumentedSymbol]) -> None:
    """Assign every symbol a unique anchor derived from its container chain."""
    for symbol in symbols:
        symbol.anchor = anchor_for(model, symbol.symbol)
    disambiguate_anchors(symbols)
