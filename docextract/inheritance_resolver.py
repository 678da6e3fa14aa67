"""Recursive expansion of <inheritdoc> elements into merged documentation."""

import logging
from typing import Any

from lxml import etree

from docextract.automatic_inheritdoc import (
    AUTOMATIC_INHERITDOC_MARKUP,
    is_eligible_for_automatic_inheritdoc,
)
from docextract.build_selector import build_default_selector, rebase_selector
from docextract.markup import (
    CREF,
    INHERITDOC,
    INHERITED_FROM,
    PATH,
    markup_to_string,
    parse_markup,
    replace_with_nodes,
)
from docextract.rewrite_type_parameter_refs import rewrite_type_parameter_refs
from docextract.select_candidate import select_candidate
from docextract.select_nodes import try_select_nodes
from docextract.symbol_model import DeclarationIdError, SymbolModel

logger = logging.getLogger(__name__)


def _has_inheritdoc_ancestor(element: etree._Element) -> bool:
    return any(a.tag == INHERITDOC for a in element.iterancestors())


class InheritanceResolver:
    """Expands inheritdoc references against a symbol model.

    Every expansion parses markup into a fresh tree and copies whatever it
    takes from other trees, so one target can feed many inheritance chains.
    """

    def __init__(self, model: SymbolModel, automatic_inheritdoc: bool = True) -> None:
        """Initialize the resolver with the model it reads declarations from."""
        self.model = model
        self.automatic_inheritdoc = automatic_inheritdoc

    def expand(
        self, symbol: Any, visited: set[Any] | None = None
    ) -> etree._Element | None:
        """Return the fully expanded documentation tree of a symbol.

        `visited` holds the targets currently being expanded along this call
        chain; a target already in it is skipped, which breaks cycles in
        override and interface graphs. Returns None when the symbol ends up
        with no documentation or its markup is malformed.

        Targets reached through an inheritdoc are expanded with the same
        automatic inheritance rule as the top-level symbol, so documentation
        flows through undocumented intermediate overrides instead of stopping
        at the first one.
        """
        if visited is None:
            visited = set()

        markup = self.model.documentation_markup(symbol)
        if not markup or not markup.strip():
            if not (
                self.automatic_inheritdoc
                and is_eligible_for_automatic_inheritdoc(self.model, symbol)
            ):
                return None
            markup = AUTOMATIC_INHERITDOC_MARKUP

        root = parse_markup(markup)
        if root is None:
            return None
        if root.tag == INHERITDOC:
            wrapper = etree.Element("doc")
            wrapper.append(root)
            root = wrapper

        targets = [e for e in root.iter(INHERITDOC) if not _has_inheritdoc_ancestor(e)]
        for element in targets:
            self._inherit(symbol, element, visited)
        return root

    def expand_to_string(self, symbol: Any, visited: set[Any] | None = None) -> str:
        """Return the expanded documentation serialized, or '' when empty."""
        return markup_to_string(self.expand(symbol, visited))

    def _resolve_target(self, symbol: Any, element: etree._Element) -> Any | None:
        cref = element.get(CREF)
        if cref is None:
            return select_candidate(self.model, symbol)

        target = self.model.resolve_declaration_id(cref)
        if target is None:
            logger.debug("inheritdoc cref %s does not match any declaration", cref)
        return target

    def _selector_for(self, element: etree._Element) -> str:
        path = element.get(PATH)
        if path:
            return rebase_selector(path)
        return build_default_selector(element.getparent())

    def _declaration_id(self, symbol: Any) -> str | None:
        try:
            return self.model.compute_declaration_id(symbol)
        except DeclarationIdError:
            return None

    def _inherit(self, symbol: Any, element: etree._Element, visited: set[Any]) -> None:
        """Replace one inheritdoc element with the markup it refers to.

        The element is removed when nothing can be inherited.
        """
        nodes = []
        target = self._resolve_target(symbol, element)
        if target is not None and target in visited:
            logger.debug(
                "Skipping inheritdoc cycle through %s", self._declaration_id(target)
            )
        elif target is not None:
            visited.add(target)
            try:
                inherited = self.expand(target, visited)
            finally:
                visited.discard(target)
            if inherited is not None:
                nodes = try_select_nodes(inherited, self._selector_for(element))

        inserted = replace_with_nodes(element, nodes)
        if not inserted:
            return

        inserted = rewrite_type_parameter_refs(
            inserted,
            self.model.all_type_parameters(target),
            self.model.all_type_arguments(symbol),
        )
        target_id = self._declaration_id(target)
        if target_id is None:
            return
        for node in inserted:
            # Comments and processing instructions carry no attributes.
            if isinstance(node.tag, str):
                node.set(INHERITED_FROM, target_id)
