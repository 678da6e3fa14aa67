"""Logic for building the XPath selector used to extract inherited markup."""

from lxml import etree

from docextract.markup import is_root_element_name

TOP_LEVEL_SELECTOR = "/*/node()[not(self::overloads)]"


def build_default_selector(parent: etree._Element) -> str:
    """Build a selector mirroring the structural position of an inheritdoc.

    `parent` is the element containing the inheritdoc. Root elements
    (<member> and <doc>) are interchangeable and match as '*'.
    """
    if is_root_element_name(parent):
        return TOP_LEVEL_SELECTOR

    path = "/node()[not(self::overloads)]"
    current: etree._Element | None = parent
    while current is not None:
        name = "*" if is_root_element_name(current) else str(current.tag)
        path = "/" + name + path
        current = current.getparent()
    return path


def rebase_selector(path: str) -> str:
    """Account for the root <doc>/<member> element in an absolute selector."""
    if path.startswith("/"):
        return "/*" + path
    return path
