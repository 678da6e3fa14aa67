"""Eligibility rules for inheriting documentation without an inheritdoc tag."""

from typing import Any

from docextract.symbol_kind import EVENT, INDEXER, METHOD, OPERATOR, PROPERTY, is_kind
from docextract.symbol_model import SymbolModel

AUTOMATIC_INHERITDOC_MARKUP = "<doc><inheritdoc/></doc>"


def is_eligible_for_automatic_inheritdoc(model: SymbolModel, symbol: Any) -> bool:
    """Check if an undocumented symbol should silently inherit documentation.

    Only members that override an inherited member, or that implement an
    interface member, are eligible.
    """
    if model.overridden_member(symbol) is not None:
        return True

    # Observed with certain operators that have no containing type.
    if model.containing_symbol(symbol) is None:
        return False

    if is_kind(model.kind(symbol), METHOD, OPERATOR, PROPERTY, INDEXER, EVENT):
        return bool(
            model.explicit_interface_implementations(symbol)
            or model.implicit_interface_implementations(symbol)
        )
    return False
