"""Command line entry point for building documentation from declarations."""

import argparse
import copy
import logging
from pathlib import Path

import yaml

from docextract.create_symbol_directory import create_symbol_directory
from docextract.declaration import Declaration
from docextract.declaration_index import DeclarationIndex
from docextract.documented_symbol import DocumentedSymbol
from docextract.extractor import DocumentationExtractor
from docextract.load_config import DEFAULT_CONFIG, known_types_for, load_config
from docextract.load_declarations import DeclarationFileError, load_declarations
from docextract.undocumented_report import render_undocumented_report
from docextract.write_xml_output import write_xml_output

XML_OUTPUT_NAME = "docs.xml"
UNDOCUMENTED_REPORT_NAME = "UNDOCUMENTED.md"


def create_configuration(path: Path) -> int:
    """Write a default configuration file."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["output_folder"] = str(Path.cwd())
    path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
    print(path)
    return 0


def _extract_assemblies(
    config: dict,
) -> tuple[dict[str, list[DocumentedSymbol]], list[DocumentedSymbol]]:
    """Load every configured declaration file and document them as one batch.

    Returns the documented symbols grouped by assembly, and all of them in
    extraction order.
    """
    files = config.get("declarations") or []
    if not files:
        msg = 'Specify at least one declaration file in "declarations"'
        raise SystemExit(msg)

    assembly_symbols: dict[str, list[DocumentedSymbol]] = {}
    assembly_of: dict[Declaration, str] = {}
    index = DeclarationIndex([])
    for f in files:
        path = Path(f)
        if not path.is_file():
            msg = f"{path} is not a valid file."
            raise SystemExit(msg)
        try:
            assembly, declarations = load_declarations(path)
        except DeclarationFileError as e:
            msg = f"{path}: {e}"
            raise SystemExit(msg) from e

        assembly_symbols.setdefault(assembly, [])
        for decl in declarations:
            assembly_of[decl] = assembly
            index.add(decl)

    # One model over every file; ids and anchors are unique across the run.
    all_symbols = DocumentationExtractor(index, config).extract()
    for symbol in all_symbols:
        assembly_symbols[assembly_of[symbol.symbol]].append(symbol)
    return assembly_symbols, all_symbols


def build_documentation(config_path: Path, dry_run: bool = False) -> int:
    """Execute the full extraction pipeline."""
    config = load_config(str(config_path))
    assembly_symbols, all_symbols = _extract_assemblies(config)

    directory = create_symbol_directory(all_symbols, known_types_for(config))
    external = {
        ref
        for s in all_symbols
        for ref in (s.container_id, s.base_type_id)
        if ref and ref not in directory
    }
    undocumented = sum(1 for s in all_symbols if s.contains_undocumented_elements)
    print(
        f"Documented {len(all_symbols)} symbols in {len(assembly_symbols)} assemblies "
        f"({undocumented} with undocumented elements, "
        f"{len(external)} external references)"
    )

    if dry_run:
        return 0

    out_root = Path(config.get("output_folder") or ".").resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    xml_path = out_root / XML_OUTPUT_NAME
    write_xml_output(assembly_symbols, xml_path)
    print(xml_path)

    report_path = out_root / UNDOCUMENTED_REPORT_NAME
    report = render_undocumented_report(all_symbols, config.get("path_prefix", "."))
    report_path.write_text(report, encoding="utf-8")
    print(report_path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    ap = argparse.ArgumentParser(
        description="Extract documentation and resolve inheritdoc references.",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log designed degradations (cycles, unknown crefs, dropped symbols)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Builds documentation.")
    build.add_argument("config", type=Path, help="The configuration file.")
    build.add_argument(
        "--dry-run",
        action="store_true",
        help="Extract and report counts without writing files",
    )

    create = sub.add_parser("create", help="Create a new configuration file.")
    create.add_argument(
        "path", type=Path, help="The path to create a new configuration file at"
    )

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "create":
        return create_configuration(args.path)

    if not args.config.is_file():
        msg = f"{args.config} is not a valid configuration file."
        raise SystemExit(msg)
    return build_documentation(args.config, dry_run=args.dry_run)


if __name__ == "__main__":
    raise SystemExit(main())
