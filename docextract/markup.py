"""Helpers for parsing, copying and splicing documentation markup trees."""

import copy
import logging
from collections.abc import Sequence

from lxml import etree

logger = logging.getLogger(__name__)

ROOT_ELEMENT_NAMES = ("member", "doc")
INHERITDOC = "inheritdoc"
TYPEPARAMREF = "typeparamref"
SEE = "see"
CREF = "cref"
PATH = "path"
NAME = "name"
INHERITED_FROM = "inheritedFrom"

# Elements and text are the only node kinds that can be spliced into markup.
MarkupNode = etree._Element | str


def parse_markup(text: str | None) -> etree._Element | None:
    """Parse a markup fragment, returning None when empty or malformed."""
    if not text or not text.strip():
        return None
    try:
        return etree.fromstring(text, etree.XMLParser(resolve_entities=False))
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.debug("Malformed documentation markup: %s", e)
        return None


def markup_to_string(element: etree._Element | None) -> str:
    """Serialize a markup tree without reformatting; None becomes ''."""
    if element is None:
        return ""
    return etree.tostring(element, encoding="unicode", with_tail=False)


def copy_node(node: etree._Element) -> etree._Element:
    """Deep-copy a subtree, detached and without its tail text."""
    clone = copy.deepcopy(node)
    clone.tail = None
    return clone


def is_root_element_name(element: etree._Element) -> bool:
    """Check if the element is a documentation root (<member> or <doc>)."""
    return element.tag in ROOT_ELEMENT_NAMES


def _append_text(
    parent: etree._Element, previous: etree._Element | None, text: str | None
) -> None:
    if not text:
        return
    if previous is None:
        parent.text = (parent.text or "") + text
    else:
        previous.tail = (previous.tail or "") + text


def replace_with_nodes(
    element: etree._Element, nodes: Sequence[MarkupNode]
) -> list[etree._Element]:
    """Replace an element in its parent with copies of the given nodes.

    Text nodes are merged into the surrounding text; the replaced element's
    tail is preserved. Returns the inserted element copies.
    """
    parent = element.getparent()
    if parent is None:
        msg = "Cannot replace a root element"
        raise ValueError(msg)

    index = parent.index(element)
    previous = parent[index - 1] if index > 0 else None
    tail = element.tail
    parent.remove(element)

    inserted: list[etree._Element] = []
    for node in nodes:
        if isinstance(node, str):
            _append_text(parent, previous, str(node))
            continue
        clone = copy_node(node)
        parent.insert(index, clone)
        index += 1
        previous = clone
        inserted.append(clone)

    _append_text(parent, previous, tail)
    return inserted
