"""Logic for deriving display names of documented symbols."""

from typing import Any

from docextract.symbol_kind import (
    CONSTRUCTOR,
    ENUM_MEMBER,
    EVENT,
    FIELD,
    INDEXER,
    METHOD,
    OPERATOR,
    PROPERTY,
    is_kind,
)
from docextract.symbol_model import SymbolModel


def display_name(model: SymbolModel, symbol: Any, fallback: str) -> str:
    """Return the short display name, e.g. 'Add(int,int)' or 'this[int index]'."""
    kind = model.kind(symbol)
    params = model.parameters(symbol)

    if is_kind(kind, METHOD, OPERATOR):
        types = ",".join(p.type_name for p in params)
        return f"{model.name(symbol)}({types})"

    if is_kind(kind, CONSTRUCTOR):
        container = model.containing_symbol(symbol)
        type_name = model.name(container) if container is not None else fallback
        types = ",".join(p.type_name for p in params)
        return f"{type_name}({types})"

    if is_kind(kind, INDEXER):
        parts = ", ".join(f"{p.type_name} {p.name}" for p in params)
        return f"this[{parts}]"

    return model.name(symbol) or fallback


def full_display_name(model: SymbolModel, symbol: Any, name: str) -> str:
    """Qualify member names with the name of their containing type."""
    kind = model.kind(symbol)
    container = model.containing_symbol(symbol)
    if container is not None and is_kind(
        kind, METHOD, OPERATOR, PROPERTY, FIELD, EVENT, INDEXER, ENUM_MEMBER
    ):
        return f"{model.name(container)}.{name}"
    return name
