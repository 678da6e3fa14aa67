"""Logic for rewriting inherited <typeparamref> elements to concrete types."""

from collections.abc import Sequence

from lxml import etree

from docextract.markup import CREF, NAME, SEE, TYPEPARAMREF


def is_documentation_id(value: str) -> bool:
    """Check if a value looks like a documentation id ('T:Foo', 'M:Bar()')."""
    return len(value) > 2 and value[1] == ":"


def _reference_for(type_argument: str) -> etree._Element:
    if is_documentation_id(type_argument):
        return etree.Element(SEE, {CREF: type_argument})
    # The argument is itself a type parameter of the referencing symbol.
    return etree.Element(TYPEPARAMREF, {NAME: type_argument})


def rewrite_type_parameter_refs(
    nodes: Sequence[etree._Element],
    type_parameters: Sequence[str],
    type_arguments: Sequence[str],
) -> list[etree._Element]:
    """Replace typeparamrefs naming an inherited type parameter.

    A reference to the n-th parameter of the target's type parameter chain
    becomes a reference to the n-th argument of the referencing symbol's
    type argument chain. References with no positional match are kept.
    The nodes must be attached to a parent; the (possibly replaced)
    top-level nodes are returned.
    """
    result = list(nodes)
    for position, node in enumerate(nodes):
        for ref in list(node.iter(TYPEPARAMREF)):
            name = ref.get(NAME)
            if name is None or name not in type_parameters:
                continue
            index = list(type_parameters).index(name)
            if index >= len(type_arguments):
                continue

            replacement = _reference_for(type_arguments[index])
            replacement.tail = ref.tail
            parent = ref.getparent()
            if parent is None:
                continue
            parent.replace(ref, replacement)
            if ref is node:
                result[position] = replacement
    return result
