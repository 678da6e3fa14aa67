"""Tests for loading declaration files."""

from pathlib import Path

import pytest

from docextract.load_declarations import (
    DeclarationFileError,
    load_declarations,
    parse_declarations,
    strip_yaml_mime_header,
)

SAMPLE = """### YamlMime:ManagedReference
assembly: Sample
items:
- uid: T:Ns.Derived
  type: Class
  name: Derived
  parent: N:Ns
  inheritance:
  - T:System.Object
  - T:Ns.Base
  implements:
  - T:Ns.IThing
  documentation: <member name="T:Ns.Derived"><summary>Derived</summary></member>
- uid: M:Ns.Derived.Add(System.Int32,Ns.Item)
  type: Method
  name: Add
  parent: T:Ns.Derived
  accessibility: Protected
  static: true
  overridden: M:Ns.Base.Add(System.Int32,Ns.Item)
  implicitImplementations:
  - M:Ns.IThing.Add(System.Int32,Ns.Item)
  syntax:
    parameters:
    - id: count
      type: T:System.Int32
    - id: item
      type: T:Ns.Item
    typeParameters:
    - id: T
    return:
      type: T:System.Boolean
- name: no type here
references:
- uid: T:Ns.Item
  name: Item
"""


def test_strip_yaml_mime_header() -> None:
    """Verify the DocFX MIME header is removed."""
    assert strip_yaml_mime_header("### YamlMime:X\nitems: []") == "items: []"
    assert strip_yaml_mime_header("items: []") == "items: []"


def test_parse_declarations() -> None:
    """Verify items are mapped onto declarations."""
    assembly, decls = parse_declarations(SAMPLE)
    assert assembly == "Sample"
    assert len(decls) == 2

    derived, add = decls
    assert derived.kind == "Class"
    assert derived.base_type == "T:Ns.Base"
    assert derived.interfaces == ["T:Ns.IThing"]
    assert derived.accessibility == "Public"
    assert derived.documentation.startswith("<member")

    assert add.accessibility == "Protected"
    assert add.is_static
    assert add.overridden == "M:Ns.Base.Add(System.Int32,Ns.Item)"
    assert add.implicit_implementations == ["M:Ns.IThing.Add(System.Int32,Ns.Item)"]
    assert add.type_parameters == ["T"]
    assert add.type_arguments is None
    assert add.return_type == "T:System.Boolean"


def test_parameter_type_names() -> None:
    """Verify parameter type names come from references or known types."""
    _, decls = parse_declarations(SAMPLE)
    params = decls[1].parameters
    assert [p.name for p in params] == ["count", "item"]
    assert [p.type_name for p in params] == ["int", "Item"]
    assert params[1].type_id == "T:Ns.Item"


def test_assembly_defaults_to_file_stem(tmp_path: Path) -> None:
    """Verify the file stem names an assembly that declares no name."""
    path = tmp_path / "MyLib.yml"
    path.write_text("items:\n- uid: T:A\n  type: Class\n", encoding="utf-8")
    assembly, decls = load_declarations(path)
    assert assembly == "MyLib"
    assert decls[0].name == "T:A"


def test_invalid_yaml_raises() -> None:
    """Verify malformed YAML is reported as a declaration file error."""
    with pytest.raises(DeclarationFileError):
        parse_declarations("items: [unclosed")


def test_items_must_be_a_list() -> None:
    """Verify a non-list items entry is rejected."""
    with pytest.raises(DeclarationFileError):
        parse_declarations("items: 3")
    with pytest.raises(DeclarationFileError):
        parse_declarations("- just a list")


def test_references_without_uid_are_skipped() -> None:
    """Verify reference mappings lacking a uid are ignored."""
    text = """items:
- uid: T:Ns.Impl
  type: Class
  inheritance:
  - uid: T:Ns.Base
  - name: no uid
  implements:
  - uid: T:Ns.IFirst
  - name: no uid
  - T:Ns.ISecond
  overridden:
    name: no uid
"""
    _, decls = parse_declarations(text)
    assert decls[0].base_type == "T:Ns.Base"
    assert decls[0].interfaces == ["T:Ns.IFirst", "T:Ns.ISecond"]
    assert decls[0].overridden is None
