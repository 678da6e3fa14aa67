"""Data model for a documented declaration in the output set."""

from dataclasses import dataclass, field
from typing import Any

from lxml import etree

from docextract.markup import parse_markup


@dataclass(eq=False)
class DocumentedSymbol:
    """Represents one documented declaration with its merged markup.

    Two records are equal when they share a documentation id.
    """

    documentation_id: str
    documentation_xml: str = ""
    symbol: Any = None  # handle into the symbol model, None for stubs
    container_id: str | None = None
    base_type_id: str | None = None
    display_name: str = ""
    full_display_name: str = ""
    anchor: str | None = None
    undocumented_element_names: list[str] = field(default_factory=list)

    @property
    def contains_undocumented_elements(self) -> bool:
        """Whether any required documentation element had to be synthesized."""
        return len(self.undocumented_element_names) > 0

    def documentation(self) -> etree._Element | None:
        """Parse the stored markup, or None when it is empty or malformed."""
        return parse_markup(self.documentation_xml)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, DocumentedSymbol)
            and other.documentation_id == self.documentation_id
        )

    def __hash__(self) -> int:
        return hash(self.documentation_id)
