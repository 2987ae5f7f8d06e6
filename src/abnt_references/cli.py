"""Command line interface for formatting, citing and validating references."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .citations import CitationFormatter
from .errors import InvalidRequestError
from .formatter import ReferenceFormatter
from .models import CitationFields, ValidationReport
from .report import render_report
from .settings import get_settings
from .validation import validate_references

logger = logging.getLogger(__name__)


def _parse_field_pairs(pairs: List[str] | None) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise InvalidRequestError(f"Expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        fields[key.strip()] = value.strip()
    return fields


def _serialize_report(reference: str, report: ValidationReport) -> Dict[str, Any]:
    return {"reference": reference, "codes": report.codes, **report.to_dict()}


def _reports_frame(references: List[str], reports: List[ValidationReport]) -> pd.DataFrame:
    rows = [
        {
            "Reference": reference,
            "Valid": "Yes" if report.is_valid else "No",
            "Score": report.score,
            "Issues": "; ".join(report.issues),
            "Suggestions": "; ".join(report.suggestions),
        }
        for reference, report in zip(references, reports)
    ]
    return pd.DataFrame(rows, columns=["Reference", "Valid", "Score", "Issues", "Suggestions"])


def _read_references(args: argparse.Namespace) -> List[str]:
    references = list(args.references or [])
    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
        references.extend(line.strip() for line in text.splitlines() if line.strip())
    return references


def _cmd_format(args: argparse.Namespace) -> int:
    fields = _parse_field_pairs(args.field)
    formatted = ReferenceFormatter().format(args.type, fields)
    if args.json:
        print(json.dumps({"formattedReference": formatted, "type": args.type}, ensure_ascii=False))
    else:
        print(formatted)
    return 0


def _cmd_cite(args: argparse.Namespace) -> int:
    fields = CitationFields(author=args.author, year=args.year, page=args.page, quote=args.quote)
    variants = CitationFormatter().generate(fields)
    if args.json:
        payload = [asdict(variant) for variant in variants]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0
    for variant in variants:
        print(f"{variant.label}: {variant.text or '-'}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    references = _read_references(args)
    if not references:
        raise InvalidRequestError("Provide references as arguments or with --input")
    reports = validate_references(references)
    print(render_report(reports, references))

    if args.json_output:
        payload = [_serialize_report(ref, report) for ref, report in zip(references, reports)]
        args.json_output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    if args.csv_output:
        _reports_frame(references, reports).to_csv(args.csv_output, index=False)

    return 0 if all(report.is_valid for report in reports) else 1


def _cmd_serve(args: argparse.Namespace) -> int:
    from .web import main as serve

    serve(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abnt-references", description="Format and validate ABNT references"
    )
    parser.add_argument("--log-level", help="Logging level (defaults to ABNT_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fmt = subparsers.add_parser("format", help="Format one reference")
    fmt.add_argument("--type", required=True, help="book, article, website or thesis (or livro, artigo, site, tese)")
    fmt.add_argument(
        "--field",
        action="append",
        metavar="KEY=VALUE",
        help="Reference field, e.g. --field author='João Silva' (can be repeated)",
    )
    fmt.add_argument("--json", action="store_true", help="Print a JSON object instead of plain text")
    fmt.set_defaults(handler=_cmd_format)

    cite = subparsers.add_parser("cite", help="Generate in-text citation variants")
    cite.add_argument("--author", default="")
    cite.add_argument("--year", default="")
    cite.add_argument("--page")
    cite.add_argument("--quote")
    cite.add_argument("--json", action="store_true", help="Print the variants as JSON")
    cite.set_defaults(handler=_cmd_cite)

    validate = subparsers.add_parser("validate", help="Validate reference strings")
    validate.add_argument("references", nargs="*", help="Reference strings to validate")
    validate.add_argument("--input", type=Path, help="Text file with one reference per line")
    validate.add_argument("--json-output", type=Path, help="Write validation reports to a JSON file")
    validate.add_argument("--csv-output", type=Path, help="Write validation reports to a CSV table")
    validate.set_defaults(handler=_cmd_validate)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)
    serve.set_defaults(handler=_cmd_serve)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or get_settings().LOG_LEVEL
    logging.basicConfig(level=level.upper())

    try:
        return args.handler(args)
    except InvalidRequestError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
