"""Logic for rendering cross-references as Markdown."""

from docextract.symbol_directory import SymbolDirectory

MARKDOWN_SPECIAL_CHARACTERS = ("\\", "<", ">", "(", ")", "#", "`", "[", "]")


def escape_markdown_characters(label: str) -> str:
    """Backslash-escape characters that Markdown would interpret in a label."""
    for character in MARKDOWN_SPECIAL_CHARACTERS:
        label = label.replace(character, "\\" + character)
    return label


def anchor_link(anchor: str, path_prefix: str = ".") -> str:
    """Return the page path of an anchored symbol."""
    return f"{path_prefix.rstrip('/')}/{anchor.lower()}.md"


def render_cref(
    cref: str | None, directory: SymbolDirectory, path_prefix: str = "."
) -> str:
    """Render a cref as a Markdown link, or as code when it has no anchor.

    Stubs for external or unknown ids have no anchor, so they degrade to text.
    """
    symbol = directory.lookup(cref)
    if not symbol.anchor:
        return f"`{symbol.display_name}`"
    label = escape_markdown_characters(symbol.display_name)
    return f"[{label}]({anchor_link(symbol.anchor, path_prefix)})"
