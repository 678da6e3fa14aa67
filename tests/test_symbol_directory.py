"""Tests for the symbol directory and its stub fallback."""

import pytest

from docextract.create_symbol_directory import (
    create_symbol_directory,
    derive_alternate_key,
)
from docextract.documented_symbol import DocumentedSymbol
from docextract.symbol_directory import SymbolDirectory


def _documented(doc_id: str, anchor: str = "a", name: str = "A") -> DocumentedSymbol:
    return DocumentedSymbol(
        documentation_id=doc_id,
        documentation_xml=f'<member name="{doc_id}"><summary>x</summary></member>',
        display_name=name,
        full_display_name=name,
        anchor=anchor,
    )


def test_lookup_returns_stored_symbol() -> None:
    """Verify stored symbols are returned as is."""
    symbol = _documented("T:Ns.A")
    directory = create_symbol_directory([symbol])
    assert directory.lookup("T:Ns.A") is symbol
    assert directory["T:Ns.A"] is symbol


def test_first_symbol_per_id_wins() -> None:
    """Verify a duplicate id does not replace the first symbol."""
    first = _documented("T:Ns.A", name="First")
    second = _documented("T:Ns.A", name="Second")
    directory = create_symbol_directory([first, second])
    assert directory["T:Ns.A"] is first
    assert len(directory) == 1


def test_miss_synthesizes_stub() -> None:
    """Verify unknown ids produce an anchorless stub named by known types."""
    directory = create_symbol_directory([])
    stub = directory.lookup("T:System.Int32")
    assert stub.display_name == "int"
    assert stub.full_display_name == "System.Int32"
    assert stub.anchor is None
    assert stub.container_id is None
    assert stub.symbol is None
    root = stub.documentation()
    assert root is not None
    assert root.get("name") == "T:System.Int32"
    assert root.find("summary") is not None


def test_stub_for_unknown_type_uses_stripped_id() -> None:
    """Verify a stub for a non-primitive type strips the kind prefix."""
    directory = create_symbol_directory([])
    assert directory.lookup("T:Other.Lib.Thing").display_name == "Other.Lib.Thing"


def test_stubs_are_equal_but_not_persisted() -> None:
    """Verify repeated misses give equal values without growing storage."""
    directory = create_symbol_directory([_documented("T:Ns.A")])
    first = directory.lookup("T:Ext.B")
    second = directory.lookup("T:Ext.B")
    assert first == second
    assert first is not second
    assert first.documentation_xml == second.documentation_xml
    assert list(directory) == ["T:Ns.A"]
    assert len(directory) == 1
    assert "T:Ext.B" not in directory


def test_null_key_becomes_placeholder() -> None:
    """Verify a None key is looked up as '(null)'."""
    directory = create_symbol_directory([])
    stub = directory.lookup(None)
    assert stub.documentation_id == "(null)"


def test_alternate_key_for_conversion_operators() -> None:
    """Verify ids with a '~' return suffix fall back to the prefix."""
    op = _documented("M:Ns.T.op_Implicit(Ns.T)")
    directory = create_symbol_directory([op])
    key = "M:Ns.T.op_Implicit(Ns.T)~System.Int32"
    assert directory.lookup(key) is op
    assert key in directory
    assert derive_alternate_key(key) == "M:Ns.T.op_Implicit(Ns.T)"
    assert derive_alternate_key("M:Ns.T.Run") is None


def test_commit_persists_stub() -> None:
    """Verify committing a miss stores the synthesized value once."""
    directory = create_symbol_directory([])
    committed = directory.commit("T:Ext.B")
    assert "T:Ext.B" in directory
    assert directory.lookup("T:Ext.B") is committed
    assert directory.commit("T:Ext.B") is committed
    assert list(directory) == ["T:Ext.B"]


def test_missing_key_without_fallback_raises() -> None:
    """Verify a plain directory reports missing keys."""
    directory = SymbolDirectory()
    with pytest.raises(KeyError):
        directory["T:Missing"]
