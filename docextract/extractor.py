"""Orchestration logic turning declarations into documented symbols."""

import logging
import re
from typing import Any

from docextract.assign_anchors import assign_anchors
from docextract.display_names import display_name, full_display_name
from docextract.documented_symbol import DocumentedSymbol
from docextract.inheritance_resolver import InheritanceResolver
from docextract.known_types import strip_kind_prefix
from docextract.markup import NAME, markup_to_string, parse_markup
from docextract.populate_missing_elements import populate_missing_elements
from docextract.symbol_kind import is_namespace_kind, is_type_kind
from docextract.symbol_model import DeclarationIdError, SymbolModel

logger = logging.getLogger(__name__)

PUBLIC = "public"


class DocumentationExtractor:
    """Walks a symbol model and produces documented symbols with merged markup."""

    def __init__(self, model: SymbolModel, config: dict[str, Any]) -> None:
        """Initialize the extractor with a model and the loaded configuration."""
        self.model = model
        self.config = config
        rules = config.get("rules", {})
        self.public_only = rules.get("public_only", True)
        self.exclude_regexes = [re.compile(r) for r in rules.get("exclude_regexes", [])]
        self.namespace_summaries: dict[str, str] = (
            config.get("namespace_summaries") or {}
        )
        self.resolver = InheritanceResolver(
            model, automatic_inheritdoc=rules.get("automatic_inheritdoc", True)
        )

    def extract(self) -> list[DocumentedSymbol]:
        """Document every eligible declaration, with unique ids and anchors."""
        output: list[DocumentedSymbol] = []
        seen_ids: set[str] = set()
        for symbol in self.model.declarations():
            documented = self._document(symbol)
            if documented is None:
                continue
            if documented.documentation_id in seen_ids:
                logger.debug("Duplicate id %s ignored", documented.documentation_id)
                continue
            seen_ids.add(documented.documentation_id)
            output.append(documented)

        for documented in output:
            name = display_name(
                self.model, documented.symbol, documented.documentation_id
            )
            documented.display_name = name
            documented.full_display_name = full_display_name(
                self.model, documented.symbol, name
            )
        assign_anchors(self.model, output)
        return output

    def _is_visible(self, symbol: Any) -> bool:
        """Check the symbol and all its non-namespace containers are public."""
        if not self.public_only:
            return True
        seen: set[int] = set()
        current = symbol
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            if (
                not is_namespace_kind(self.model.kind(current))
                and self.model.accessibility(current).lower() != PUBLIC
            ):
                return False
            current = self.model.containing_symbol(current)
        return True

    def _is_excluded(self, documentation_id: str) -> bool:
        name = strip_kind_prefix(documentation_id)
        return any(r.search(name) for r in self.exclude_regexes)

    def _namespace_doc(self, symbol: Any) -> str:
        summary = self.namespace_summaries.get(self.model.name(symbol))
        if summary is None:
            return ""
        return f"<doc><summary>{summary}</summary></doc>"

    def _id_or_none(self, symbol: Any | None) -> str | None:
        if symbol is None:
            return None
        try:
            return self.model.compute_declaration_id(symbol)
        except DeclarationIdError:
            return None

    def _document(self, symbol: Any) -> DocumentedSymbol | None:
        """Build the documented symbol for one declaration, or None to skip it."""
        if not self._is_visible(symbol):
            return None

        kind = self.model.kind(symbol)
        if is_namespace_kind(kind):
            doc = self._namespace_doc(symbol)
        else:
            doc = self.resolver.expand_to_string(symbol)

        documentation_id = None
        root = parse_markup(doc)
        if root is not None:
            documentation_id = root.get(NAME)
        if not documentation_id:
            try:
                documentation_id = self.model.compute_declaration_id(symbol)
            except DeclarationIdError as e:
                logger.debug("Dropping symbol without declaration id: %s", e)
                return None

        if self._is_excluded(documentation_id):
            logger.debug("Excluded %s", documentation_id)
            return None

        base_type_id = None
        if is_type_kind(kind):
            base_type_id = self._id_or_none(self.model.base_type(symbol))

        element, undocumented = populate_missing_elements(
            doc, symbol, documentation_id, self.model
        )
        return DocumentedSymbol(
            documentation_id=documentation_id,
            documentation_xml=markup_to_string(element),
            symbol=symbol,
            container_id=self._id_or_none(self.model.containing_symbol(symbol)),
            base_type_id=base_type_id,
            undocumented_element_names=undocumented,
        )
