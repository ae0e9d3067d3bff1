"""ADF Validatorのコマンドラインインターフェース。

Usage:
  adf-validate <file> [--type <type>]
  adf-validate --dir <directory>
  adf-validate --test-vectors <path>

Examples:
  adf-validate /var/www/llms.txt
  adf-validate site/ai.json --type ai-json
  adf-validate --dir /var/www/html
  adf-validate --test-vectors ./test-vectors
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel

from adfvalidator.config import ValidatorConfig
from adfvalidator.models.errors import AdfValidatorError
from adfvalidator.models.registry import FILE_TYPE_TAGS
from adfvalidator.models.result import DirectoryReport, ValidationResult, VectorReport
from adfvalidator.services.validation import ValidationService
from adfvalidator.storage.schemas import SchemaStore

VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adf-validate",
        description=f"AI Discovery Files Validator v{VERSION}",
        epilog="File types: " + ", ".join(FILE_TYPE_TAGS),
    )
    parser.add_argument("file", nargs="?", help="Validate a single file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dir", dest="directory", help="Scan directory for ADF files")
    mode.add_argument("--test-vectors", help="Validate test vectors (expects valid/ and invalid/ subdirs)")
    parser.add_argument("--type", dest="file_type", help="Override file type detection")
    parser.add_argument("--schema-dir", type=Path, help="Path to JSON Schemas")
    parser.add_argument("--quiet", action="store_true", help="Only show failing results")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _print_json(model: BaseModel) -> None:
    print(json.dumps(model.model_dump(), ensure_ascii=False, indent=2))


def _print_result(result: ValidationResult, quiet: bool) -> None:
    if not quiet or not result.valid:
        print(result.render())
        print()


def _report_directory(report: DirectoryReport, quiet: bool) -> None:
    if not report.results:
        print(f"No AI Discovery Files found in {report.directory}")
        print(f"Looked for: {', '.join(report.searched)}")
        return

    for result in report.results:
        _print_result(result, quiet)
    if report.cross_result is not None:
        _print_result(report.cross_result, quiet)
    print(f"Results: {report.passed}/{report.total} files passed")


def _report_test_vectors(report: VectorReport) -> None:
    sections = (
        ("=== Valid Test Vectors (should PASS) ===", report.valid_vectors, "  ^ UNEXPECTED FAILURE"),
        (
            "=== Invalid Test Vectors (should FAIL) ===",
            report.invalid_vectors,
            "  ^ UNEXPECTED PASS — this file should have failed validation",
        ),
    )
    for header, outcomes, flag in sections:
        print(header)
        print()
        for outcome in outcomes:
            print(outcome.result.render())
            if outcome.unexpected:
                print(flag)
            print()


def run(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """解析済み引数に従って検証を実行し、終了コードを返す。"""
    service = ValidationService(schemas=SchemaStore(schema_dir=config.schema_dir))
    as_json = args.format == "json"

    if args.directory:
        dir_report = service.validate_directory(Path(args.directory).resolve())
        if as_json:
            _print_json(dir_report)
        else:
            _report_directory(dir_report, args.quiet)
        # 1件も見つからない場合は失敗扱いにしない
        return 0 if dir_report.valid else 1

    if args.test_vectors:
        vector_report = service.run_test_vectors(Path(args.test_vectors).resolve())
        if as_json:
            _print_json(vector_report)
        else:
            _report_test_vectors(vector_report)
        return 0 if vector_report.all_passed else 1

    result = service.validate_file(Path(args.file).resolve(), args.file_type)
    if as_json:
        _print_json(result)
    elif not args.quiet or not result.valid:
        print(result.render())
    return 0 if result.valid else 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file and not args.directory and not args.test_vectors:
        parser.print_help()
        return 0
    if args.file and (args.directory or args.test_vectors):
        parser.error("a file argument cannot be combined with --dir or --test-vectors")

    config = ValidatorConfig()
    if args.schema_dir is not None:
        config = config.model_copy(update={"schema_dir": args.schema_dir.resolve()})

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args, config)
    except AdfValidatorError as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
