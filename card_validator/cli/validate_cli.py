"""
Command-line interface for validating card data files.

Usage:
    card-validator validate <cards_file> [--abilities <file>] [--config <file>] [options]
    card-validator rules [--config <file>]
"""

import argparse
import json
import sys
from pathlib import Path

from card_validator.core.models import Severity, ValidatorConfig
from card_validator.core.models.validator_config import ABILITY_REFERENCES
from card_validator.core.rules import RuleConfigLoader, RuleEngine, resolve_config
from card_validator.observability import get_logger, set_package_level
from card_validator.readers import load_abilities, load_cards
from card_validator.reporting import render, summarize

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def build_config(args) -> ValidatorConfig:
    """
    Resolve configuration from the optional config file, then CLI flags.

    Args:
        args: Command-line arguments

    Returns:
        Resolved ValidatorConfig
    """
    overrides = RuleConfigLoader(args.config).load_overrides() if args.config else {}

    rules = dict(overrides.get("rules") or {})
    for rule_name in getattr(args, "disable", None) or []:
        rules[rule_name] = False
    if rules:
        overrides["rules"] = rules

    if getattr(args, "strict", False):
        overrides["strictMode"] = True
    if getattr(args, "format", None):
        overrides["reportFormat"] = args.format

    return resolve_config(overrides)


def exit_status(counts: dict[str, int], strict_mode: bool) -> int:
    """Findings fail the run when any are errors, or any at all in strict mode."""
    if counts[Severity.ERROR.value]:
        return EXIT_FINDINGS
    if strict_mode and sum(counts.values()):
        return EXIT_FINDINGS
    return EXIT_OK


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    try:
        config = build_config(args)
        cards = load_cards(args.cards)
        abilities = load_abilities(args.abilities) if args.abilities else None
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    engine = RuleEngine(config)
    findings = engine.validate(cards)

    if abilities is not None and config.is_enabled(ABILITY_REFERENCES):
        findings.extend(engine.validate_abilities(cards, abilities))

    report = render(findings, config.report_format)
    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        logger.info(f"Report written to {args.output}")
    else:
        sys.stdout.write(report)
        if not report.endswith("\n"):
            sys.stdout.write("\n")

    counts = summarize(findings)
    logger.info("Validation finished", extra=counts)
    return exit_status(counts, config.strict_mode)


def rules_command(args) -> int:
    """Print the resolved configuration as JSON."""
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print(json.dumps(config.model_dump(by_alias=True, mode="json"), indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="card-validator",
        description="Consistency checks for trading card game data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a card list with the default rules
  card-validator validate data/cards.json

  # Check ability references and use custom bounds
  card-validator validate data/cards.yaml --abilities data/abilities.yaml \\
      --config config/validator.yaml

  # CSV export without the balance heuristic
  card-validator validate data/cards.csv --format csv --disable costBalance \\
      --output report.csv

  # Show the resolved configuration
  card-validator rules --config config/validator.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR); LOG_LEVEL env var otherwise"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a card data file")
    validate_parser.add_argument("cards", help="Path to card file (json, yaml, csv)")
    validate_parser.add_argument("--abilities", help="Path to ability master data file")
    validate_parser.add_argument("--config", help="Path to validator configuration (yaml, json)")
    validate_parser.add_argument(
        "--format",
        choices=["console", "json", "csv"],
        help="Report format (default: from config, else console)"
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 on any finding, not only errors"
    )
    validate_parser.add_argument(
        "--disable",
        action="append",
        metavar="RULE",
        help="Disable a rule by name (repeatable)"
    )
    validate_parser.add_argument("--output", help="Write the report to a file instead of stdout")
    validate_parser.set_defaults(handler=validate_command)

    rules_parser = subparsers.add_parser("rules", help="Show the resolved configuration")
    rules_parser.add_argument("--config", help="Path to validator configuration (yaml, json)")
    rules_parser.set_defaults(handler=rules_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_package_level(args.log_level)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
