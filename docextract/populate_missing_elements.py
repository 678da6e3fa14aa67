"""Logic for injecting placeholders for required but missing documentation."""

from typing import Any

from lxml import etree

from docextract.markup import NAME, parse_markup
from docextract.rewrite_type_parameter_refs import is_documentation_id
from docextract.symbol_kind import (
    CONSTRUCTOR,
    DELEGATE,
    INDEXER,
    METHOD,
    OPERATOR,
    is_kind,
)
from docextract.symbol_model import SymbolModel

NOT_DOCUMENTED_TEXT = ""
VOID_TYPE_ID = "T:System.Void"


def _parameter_type_id(type_id: str | None) -> str | None:
    """Return the referenceable type id; arrays refer to their element type."""
    if not type_id or not is_documentation_id(type_id):
        return None
    while type_id.endswith("]") and "[" in type_id:
        type_id = type_id[: type_id.rindex("[")]
    return type_id


def _has_non_void_return(model: SymbolModel, symbol: Any) -> bool:
    return_type = model.return_type(symbol)
    return bool(return_type) and return_type != VOID_TYPE_ID


def _find_named(root: etree._Element, tag: str, name: str) -> etree._Element | None:
    for element in root.iterchildren(tag):
        if element.get(NAME) == name:
            return element
    return None


def _add_placeholder(
    root: etree._Element, tag: str, name: str | None = None
) -> etree._Element:
    element = etree.SubElement(root, tag, {NAME: name} if name is not None else {})
    element.text = NOT_DOCUMENTED_TEXT
    return element


def populate_missing_elements(
    doc: str, symbol: Any, documentation_id: str, model: SymbolModel
) -> tuple[etree._Element, list[str]]:
    """Add empty placeholders for every required element the markup lacks.

    Every symbol needs a summary. Methods, operators, constructors, delegates
    and indexers need one <param> per parameter; non-void methods, operators
    and delegates, and all indexers, need <returns>; methods and delegates
    need one <typeparam> per own type parameter. Returns the completed tree
    and the names of the elements that were missing.
    """
    undocumented: list[str] = []

    root = parse_markup(doc)
    if root is None:
        root = etree.Element("member", {NAME: documentation_id})

    if root.find("summary") is None:
        _add_placeholder(root, "summary")
        undocumented.append("summary")

    kind = model.kind(symbol)
    if is_kind(kind, METHOD, OPERATOR, CONSTRUCTOR, DELEGATE, INDEXER):
        for parameter in model.parameters(symbol):
            param_doc = _find_named(root, "param", parameter.name)
            if param_doc is None:
                param_doc = _add_placeholder(root, "param", parameter.name)
                undocumented.append(f'parameter "{parameter.name}"')

            # Renderers show parameter types without reading the source.
            param_doc.set("typeName", parameter.type_name)
            type_id = _parameter_type_id(parameter.type_id)
            if type_id is None:
                param_doc.attrib.pop("typeID", None)
            else:
                param_doc.set("typeID", type_id)

    needs_returns = is_kind(kind, INDEXER) or (
        is_kind(kind, METHOD, OPERATOR, DELEGATE)
        and _has_non_void_return(model, symbol)
    )
    if needs_returns and root.find("returns") is None:
        _add_placeholder(root, "returns")
        undocumented.append("return")

    if is_kind(kind, METHOD, DELEGATE):
        for name in model.type_parameters(symbol):
            if _find_named(root, "typeparam", name) is None:
                _add_placeholder(root, "typeparam", name)
                undocumented.append(f'type parameter "{name}"')

    return root, undocumented
