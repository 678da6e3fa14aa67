"""Logic for choosing the declaration an inheritdoc inherits from."""

from typing import Any

from docextract.symbol_kind import (
    CLASS,
    CONSTRUCTOR,
    INTERFACE,
    is_kind,
    is_namespace_kind,
    is_type_kind,
)
from docextract.symbol_model import SymbolModel


def is_same_signature(model: SymbolModel, left: Any, right: Any) -> bool:
    """Compare parameter count, staticness and parameter types structurally."""
    left_params = model.parameters(left)
    right_params = model.parameters(right)
    if len(left_params) != len(right_params):
        return False
    if model.is_static(left) != model.is_static(right):
        return False
    return all(
        lp.type_id == rp.type_id for lp, rp in zip(left_params, right_params)
    )


def _base_constructor(model: SymbolModel, constructor: Any) -> Any | None:
    containing_type = model.containing_symbol(constructor)
    if containing_type is None:
        return None
    base = model.base_type(containing_type)
    if base is None:
        return None
    matches = (
        c for c in model.constructors(base) if is_same_signature(model, constructor, c)
    )
    return next(matches, None)


def select_candidate(model: SymbolModel, symbol: Any) -> Any | None:
    """Return the default inheritance target of a symbol, in priority order.

    1. The first explicit interface implementation.
    2. The overridden member.
    3. For constructors, the base type constructor with the same signature.
    4. For classes the base type, for interfaces the first base interface;
       structs, enums, delegates and namespaces have no candidate.
    5. Otherwise, the first implicit interface implementation.
    """
    explicit = model.explicit_interface_implementations(symbol)
    if explicit:
        return explicit[0]

    overridden = model.overridden_member(symbol)
    if overridden is not None:
        return overridden

    kind = model.kind(symbol)
    if is_kind(kind, CONSTRUCTOR):
        return _base_constructor(model, symbol)

    if is_type_kind(kind) or is_namespace_kind(kind):
        if is_kind(kind, CLASS):
            return model.base_type(symbol)
        if is_kind(kind, INTERFACE):
            interfaces = model.base_interfaces(symbol)
            return interfaces[0] if interfaces else None
        return None

    implicit = model.implicit_interface_implementations(symbol)
    return implicit[0] if implicit else None
