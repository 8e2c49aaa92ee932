"""
Command-line interface for validating JSON payloads against a YAML rule set.

Usage:
    python -m bean_validator.cli.validator_cli check --rules <rules.yaml> --input <payload.json> [--path <path>]
    python -m bean_validator.cli.validator_cli list-validators

Exit codes:
    0  every record is valid
    1  at least one record failed validation
    2  configuration error (missing file, malformed rules, unknown rule type)
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bean_validator.config import load_settings
from bean_validator.core.models import ErrorResponse
from bean_validator.core.rules import RuleConfigLoader, TypeRuleSet, ValidationEngine
from bean_validator.core.validators import ValidatorNotFound
from bean_validator.observability.logger import configure_logging, get_logger, log_operation
from bean_validator.service import default_registry, default_table, define_fields

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


class PayloadRecord:
    """Base class for records materialized from an untyped JSON payload."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({vars(self)})"


def make_record_type(rules_path: Path) -> type:
    """
    Create a fresh record class for one rule file.

    Each rule file gets its own class so its rules never mix with another
    file's in the rule registry; the entry goes away with the class.
    """
    return type("PayloadRecord", (PayloadRecord,), {"__doc__": f"Record validated by {rules_path.name}"})


def load_payload(input_path: Path) -> Any:
    """
    Load a JSON payload from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    with open(input_path) as f:
        return json.load(f)


def validate_records(
    records: list[dict[str, Any]],
    rule_set: TypeRuleSet,
    record_type: type,
    engine: ValidationEngine,
) -> list[tuple[int, dict[str, list[str]]]]:
    """
    Validate payload records, returning (index, errors) for each failing record.

    Raises:
        ValidatorNotFound: If a rule references an unregistered rule type
    """
    failures = []
    for idx, values in enumerate(records):
        record = record_type()
        define_fields(record, values, rule_set, registry=engine.registry)
        errors = engine.validate(record)
        if errors:
            failures.append((idx, errors))
    return failures


def check_command(args, metrics_enabled: bool = True) -> int:
    """
    Validate a JSON object, or a list of objects, against a rule file.

    Args:
        args: Command line arguments
        metrics_enabled: Whether to record Prometheus metrics

    Returns:
        Process exit code
    """
    rules_path = Path(args.rules)
    input_path = Path(args.input)
    base_path = args.path or str(input_path)

    try:
        rule_set = RuleConfigLoader(rules_path).load_rules()
        payload = load_payload(input_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    is_batch = isinstance(payload, list)
    records = payload if is_batch else [payload]

    if not all(isinstance(record, dict) for record in records):
        print("Error: payload must be a JSON object or a list of objects", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    engine = ValidationEngine(default_registry, default_table, record_metrics=metrics_enabled)
    record_type = make_record_type(rules_path)

    try:
        with log_operation("Validating payload", logger=logger, rules=str(rules_path), records=len(records)):
            failures = validate_records(records, rule_set, record_type, engine)
    except (ValidatorNotFound, re.error) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if not failures:
        print(json.dumps({"valid": True, "count": len(records)}))
        return EXIT_VALID

    responses = [
        ErrorResponse(path=f"{base_path}[{idx}]" if is_batch else base_path, errors=errors)
        for idx, errors in failures
    ]

    if is_batch:
        output = [response.model_dump(mode="json") for response in responses]
    else:
        output = responses[0].model_dump(mode="json")

    print(json.dumps(output, indent=2))
    logger.info(
        "Validation failed",
        extra={"rules": str(rules_path), "failed_records": len(failures), "records": len(records)},
    )
    return EXIT_INVALID


def list_validators_command(args) -> int:
    """Print the registered rule-type names."""
    for name in default_table.names():
        print(name)
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bean-validator",
        description="Validate JSON payloads against declarative field rules",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT or json)"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Optional .env file with settings (default: .env)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser(
        "check",
        help="Validate a JSON payload against a YAML rule file"
    )
    check_parser.add_argument(
        "--rules",
        required=True,
        help="Path to the YAML rule file"
    )
    check_parser.add_argument(
        "--input",
        required=True,
        help="Path to the JSON payload (object or list of objects)"
    )
    check_parser.add_argument(
        "--path",
        help="Path reported in error responses (default: the input path)"
    )

    subparsers.add_parser(
        "list-validators",
        help="List registered rule types"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the validator CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_CONFIG_ERROR

    try:
        settings = load_settings(args.env_file)
    except ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        logger.error(f"Configuration error: {details}", exc_info=True)
        print(f"Error: invalid settings: {details}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(
        level=args.log_level or settings.log_level,
        format_type=args.log_format or settings.log_format,
    )

    try:
        if args.command == "check":
            return check_command(args, metrics_enabled=settings.metrics_enabled)
        elif args.command == "list-validators":
            return list_validators_command(args)
        else:
            parser.print_help()
            return EXIT_CONFIG_ERROR

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
