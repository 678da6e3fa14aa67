"""Logic for loading declaration YAML files into Declaration objects."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from docextract.declaration import Declaration, Parameter
from docextract.known_types import display_name_for_id

YAML_MIME_PREFIX = "### YamlMime:"


class DeclarationFileError(ValueError):
    """Raised when a declaration file cannot be interpreted."""


def strip_yaml_mime_header(text: str) -> str:
    """Remove the DocFX YAML MIME header from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def _uid_of(value: Any) -> str | None:
    """Return the uid of a reference given as a string or a mapping."""
    if isinstance(value, dict):
        value = value.get("uid")
    return str(value) if value else None


def _uids(values: Any) -> list[str]:
    return [u for u in (_uid_of(x) for x in values or []) if u is not None]


def _type_parameter_names(syntax: dict[str, Any]) -> list[str]:
    names = (
        tp.get("id") if isinstance(tp, dict) else tp
        for tp in syntax.get("typeParameters") or []
    )
    return [str(n) for n in names if n]


def _iter_items(doc: dict[str, Any]) -> Iterable[dict[str, Any]]:
    items = doc.get("items") or []
    if not isinstance(items, list):
        msg = "'items' must be a list"
        raise DeclarationFileError(msg)
    for it in items:
        if isinstance(it, dict) and it.get("type"):
            yield it


def _build_parameters(
    syntax: dict[str, Any], ref_names: dict[str, str]
) -> list[Parameter]:
    params = []
    for p in syntax.get("parameters") or []:
        if not isinstance(p, dict) or not p.get("id"):
            continue
        type_id = p.get("type")
        type_id = str(type_id) if type_id else None
        type_name = p.get("typeName") or ref_names.get(type_id or "")
        if not type_name:
            type_name = display_name_for_id(type_id) if type_id else ""
        params.append(
            Parameter(name=str(p["id"]), type_id=type_id, type_name=type_name)
        )
    return params


def _build_declaration(it: dict[str, Any], ref_names: dict[str, str]) -> Declaration:
    syntax = it.get("syntax") or {}
    if not isinstance(syntax, dict):
        msg = f"'syntax' of {it.get('uid')} must be a mapping"
        raise DeclarationFileError(msg)

    inheritance = _uids(it.get("inheritance"))
    type_arguments = it.get("typeArguments")
    ret = syntax.get("return") or {}
    return_type = ret.get("type") if isinstance(ret, dict) else None

    uid = it.get("uid")
    return Declaration(
        uid=str(uid) if uid else None,
        kind=str(it["type"]).strip(),
        name=str(it.get("name") or uid or ""),
        parent=str(it["parent"]) if it.get("parent") else None,
        accessibility=str(it.get("accessibility") or "Public"),
        is_static=bool(it.get("static", False)),
        documentation=str(it.get("documentation") or ""),
        base_type=inheritance[-1] if inheritance else None,
        interfaces=_uids(it.get("implements")),
        overridden=_uid_of(it.get("overridden")),
        explicit_implementations=_uids(it.get("explicitImplementations")),
        implicit_implementations=_uids(it.get("implicitImplementations")),
        type_parameters=_type_parameter_names(syntax),
        type_arguments=_uids(type_arguments) if type_arguments is not None else None,
        parameters=_build_parameters(syntax, ref_names),
        return_type=str(return_type) if return_type else None,
    )


def parse_declarations(
    text: str, default_name: str = ""
) -> tuple[str, list[Declaration]]:
    """Parse declaration YAML text into an assembly name and its declarations."""
    try:
        doc = yaml.safe_load(strip_yaml_mime_header(text)) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML: {e}"
        raise DeclarationFileError(msg) from e
    if not isinstance(doc, dict):
        msg = "Declaration file must contain a mapping"
        raise DeclarationFileError(msg)

    ref_names: dict[str, str] = {}
    for ref in doc.get("references") or []:
        if isinstance(ref, dict) and ref.get("uid") and ref.get("name"):
            ref_names[str(ref["uid"])] = str(ref["name"])

    declarations = [_build_declaration(it, ref_names) for it in _iter_items(doc)]
    return str(doc.get("assembly") or default_name), declarations


def load_declarations(path: Path) -> tuple[str, list[Declaration]]:
    """Load a declaration YAML file.

    The assembly name defaults to the file stem.
    """
    return parse_declarations(path.read_text(encoding="utf-8"), default_name=path.stem)
