"""Command-line interface for htmldoc."""

import argparse
import json
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .audit import Finding, find_unescaped_markup
from .build import build_document, example_document, load_document_spec
from .dom_model import Document
from .io_utils import warn
from .models import DocumentSpec
from .util_fs import write_html


def _package_version() -> str:
    try:
        return version("htmldoc")
    except PackageNotFoundError:
        # Running from a source checkout that was never installed.
        return "unknown"


def _load_spec(path: Path) -> DocumentSpec:
    if not path.is_file():
        raise SystemExit(f"Document description not found: {path}")
    try:
        return load_document_spec(path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid document description in {path}: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc


def _report(findings: list[Finding]) -> None:
    for finding in findings:
        warn(finding.format())


def _emit(document: Document, output: Optional[str]) -> None:
    if output is None:
        sys.stdout.write(document.get_html())
        return
    try:
        path = write_html(output, document)
    except OSError as exc:
        raise SystemExit(f"Could not write {output}: {exc}") from exc
    warn(f"[render] wrote {path}")


def _handle_render(args: argparse.Namespace) -> None:
    spec = _load_spec(Path(args.input))
    document = build_document(spec)

    findings = find_unescaped_markup(document.root())
    _report(findings)
    if findings and args.strict:
        raise SystemExit(1)

    _emit(document, args.output)


def _handle_example(args: argparse.Namespace) -> None:
    _emit(example_document(), args.output)


def _handle_audit(args: argparse.Namespace) -> None:
    spec = _load_spec(Path(args.input))
    findings = find_unescaped_markup(build_document(spec).root())
    if findings:
        _report(findings)
        raise SystemExit(1)
    print(f"OK: no unescaped markup in {args.input}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmldoc",
        description="Build HTML documents from YAML or JSON descriptions.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmldoc {_package_version()}",
        help="Show the htmldoc version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a document description to HTML.",
        description=(
            "Validate a YAML/JSON document description, build the tree and "
            "write the serialized HTML."
        ),
    )
    render_parser.add_argument("input", help="Path to the document description (.yaml or .json).")
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML (default: stdout).",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of rendering when text or attribute values contain unescaped markup.",
    )
    render_parser.set_defaults(func=_handle_render)

    example_parser = subparsers.add_parser(
        "example",
        help="Emit the built-in example document.",
        description="Render the link-and-paragraph example document.",
    )
    example_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML (default: stdout).",
    )
    example_parser.set_defaults(func=_handle_example)

    audit_parser = subparsers.add_parser(
        "audit",
        help="List unescaped markup characters in a description.",
        description="Report text and attribute values containing &, < or >.",
    )
    audit_parser.add_argument("input", help="Path to the document description (.yaml or .json).")
    audit_parser.set_defaults(func=_handle_audit)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()


__all__ = ["build_parser", "main"]
