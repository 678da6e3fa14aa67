"""Logic for evaluating selectors against documentation markup."""

import logging

from lxml import etree

from docextract.markup import MarkupNode

logger = logging.getLogger(__name__)


def _is_fragment_node(item: object) -> bool:
    if etree.iselement(item):
        return True
    # Text results are "smart strings" that know where they came from.
    return isinstance(item, str) and (
        getattr(item, "is_text", False) or getattr(item, "is_tail", False)
    )


def try_select_nodes(root: etree._Element, xpath: str) -> list[MarkupNode]:
    """Evaluate an XPath selector, degrading every failure to no nodes.

    Only node-sets made of elements and text qualify; numbers, booleans,
    strings, attributes and document nodes yield nothing.
    """
    try:
        result = root.xpath(xpath)
    except (etree.XPathError, ValueError) as e:
        logger.debug("Selector %r could not be evaluated: %s", xpath, e)
        return []

    if not isinstance(result, list):
        logger.debug("Selector %r produced a non-fragment result", xpath)
        return []
    if not all(_is_fragment_node(item) for item in result):
        logger.debug("Selector %r selected nodes that cannot be inlined", xpath)
        return []
    return result
