"""Command-line frontend for the bidlint core engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from bidlint.core.api import (
    format_json,
    get_example,
    list_examples,
    list_rules,
    minify_json,
    validate,
)
from bidlint.core.validate.report import SEVERITIES

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _cmd_validate(args: argparse.Namespace) -> int:
    result = validate(_read_input(args.input), rule_groups=args.rule_group or None)
    payload = result.to_dict()
    if args.severity:
        payload["issues"] = [item for item in payload["issues"] if item["severity"] == args.severity]
    payload["summary"] = result.summary()
    if args.report:
        Path(args.report).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    _json_dump(payload)
    if args.strict and not result.is_valid:
        return 1
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    print(format_json(_read_input(args.input), indent=args.indent))
    return 0


def _cmd_minify(args: argparse.Namespace) -> int:
    print(minify_json(_read_input(args.input)))
    return 0


def _cmd_rules(args: argparse.Namespace) -> int:
    _json_dump(list_rules(args.prefix))
    return 0


def _cmd_examples(args: argparse.Namespace) -> int:
    if args.name:
        _json_dump(get_example(args.name))
    else:
        _json_dump(list_examples())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bidlint", description="OpenRTB bid request validator")
    parser.add_argument("--debug", action="store_true", help="Log engine details to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_cmd = subparsers.add_parser("validate", help="Validate a bid request JSON file")
    validate_cmd.add_argument("input", help="Bid request JSON path, or - for stdin")
    validate_cmd.add_argument(
        "--rule-group",
        action="append",
        choices=["eq", "core"],
        default=[],
        help="Rule group to run (repeatable); every group by default",
    )
    validate_cmd.add_argument("--severity", choices=list(SEVERITIES), default=None)
    validate_cmd.add_argument("--strict", action="store_true", help="Exit 1 when the request is invalid")
    validate_cmd.add_argument("--report", default="")
    validate_cmd.set_defaults(func=_cmd_validate)

    format_cmd = subparsers.add_parser("format", help="Pretty-print a JSON document")
    format_cmd.add_argument("input", help="JSON path, or - for stdin")
    format_cmd.add_argument("--indent", type=int, default=2)
    format_cmd.set_defaults(func=_cmd_format)

    minify_cmd = subparsers.add_parser("minify", help="Minify a JSON document")
    minify_cmd.add_argument("input", help="JSON path, or - for stdin")
    minify_cmd.set_defaults(func=_cmd_minify)

    rules_cmd = subparsers.add_parser("rules", help="List catalog rules")
    rules_cmd.add_argument("--prefix", default=None, help="Only rule ids starting with this prefix")
    rules_cmd.set_defaults(func=_cmd_rules)

    examples_cmd = subparsers.add_parser("examples", help="List example bid requests, or print one")
    examples_cmd.add_argument("name", nargs="?", default=None)
    examples_cmd.set_defaults(func=_cmd_examples)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
