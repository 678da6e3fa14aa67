"""Tests for cref rendering, the undocumented report and XML output."""

from pathlib import Path

from lxml import etree

from docextract.create_symbol_directory import create_symbol_directory
from docextract.documented_symbol import DocumentedSymbol
from docextract.render_cref import escape_markdown_characters, render_cref
from docextract.undocumented_report import render_undocumented_report
from docextract.write_xml_output import build_xml_output, write_xml_output


def _symbol(doc_id: str, xml: str = "", **kwargs: object) -> DocumentedSymbol:
    return DocumentedSymbol(documentation_id=doc_id, documentation_xml=xml, **kwargs)


def test_escape_markdown_characters() -> None:
    """Verify characters significant to Markdown are escaped."""
    assert escape_markdown_characters("List<T>.Add(T)") == r"List\<T\>.Add\(T\)"


def test_render_cref_links_documented_symbols() -> None:
    """Verify anchored symbols render as links and stubs as code."""
    directory = create_symbol_directory(
        [_symbol("T:Ns.List`1", display_name="List<T>", anchor="ns.list`1")]
    )
    assert render_cref("T:Ns.List`1", directory, "/api/") == (
        r"[List\<T\>](/api/ns.list`1.md)"
    )
    assert render_cref("T:System.String", directory) == "`string`"


def test_render_undocumented_report() -> None:
    """Verify the report lists padded symbols with their missing elements."""
    symbols = [
        _symbol("T:Ns.A", full_display_name="A", anchor="ns.a"),
        _symbol(
            "M:Ns.A.Run",
            full_display_name="A.Run()",
            anchor="ns.a.run",
            undocumented_element_names=["summary", "return"],
        ),
    ]
    report = render_undocumented_report(symbols, "docs")
    assert report.splitlines() == [
        "# Undocumented Items",
        "",
        "1 items without documentation (of 2 total; 50% documented).",
        "",
        r"* [A.Run\(\)](docs/ns.a.run.md): summary, return",
    ]


def test_render_undocumented_report_empty() -> None:
    """Verify an empty symbol set reports full coverage."""
    report = render_undocumented_report([])
    assert "0 items without documentation (of 0 total; 100% documented)." in report


def test_build_xml_output_groups_by_assembly() -> None:
    """Verify members are grouped per assembly and broken markup is skipped."""
    doc = build_xml_output(
        {
            "Lib": [
                _symbol("T:A", '<member name="T:A"><summary>A</summary></member>'),
                _symbol("T:B", "<member><summary>"),
            ],
            "Other": [],
        }
    )
    assert doc.xpath("/doc/assembly/name/text()") == ["Lib", "Other"]
    members = doc.xpath("/doc/assembly[name='Lib']/members/member")
    assert [m.get("name") for m in members] == ["T:A"]


def test_write_xml_output(tmp_path: Path) -> None:
    """Verify the combined document is written with an XML declaration."""
    path = tmp_path / "out" / "docs.xml"
    write_xml_output({"Lib": [_symbol("T:A", "<member name='T:A'/>")]}, path)
    content = path.read_bytes()
    assert content.startswith(b"<?xml")
    root = etree.fromstring(content)
    assert root.find("assembly/members/member").get("name") == "T:A"
