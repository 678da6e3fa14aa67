"""Logic for reporting symbols with missing documentation."""

from collections.abc import Sequence

from docextract.documented_symbol import DocumentedSymbol
from docextract.render_cref import anchor_link, escape_markdown_characters


def render_undocumented_report(
    symbols: Sequence[DocumentedSymbol], path_prefix: str = "."
) -> str:
    """Render a Markdown list of symbols whose documentation had to be padded."""
    undocumented = [s for s in symbols if s.contains_undocumented_elements]
    total = len(symbols)
    percent = ((total - len(undocumented)) / total * 100) if total else 100.0

    lines = [
        "# Undocumented Items",
        "",
        (
            f"{len(undocumented)} items without documentation "
            f"(of {total} total; {percent:.0f}% documented)."
        ),
        "",
    ]
    for symbol in undocumented:
        label = escape_markdown_characters(symbol.full_display_name)
        target = anchor_link(symbol.anchor or symbol.documentation_id, path_prefix)
        names = ", ".join(symbol.undocumented_element_names)
        lines.append(f"* [{label}]({target}): {names}")
    lines.append("")
    return "\n".join(lines)
