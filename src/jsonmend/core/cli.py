"""
Command-line entry point.

Reads JSON-like text from a file or stdin, repairs it and writes strictly
valid JSON to stdout or a file.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from jsonmend.core.common.exceptions import ConfigurationError, JsonRepairError
from jsonmend.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
    get_logger,
)
from jsonmend.core.config.app_config import AppConfig, LogLevel, load_config
from jsonmend.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
)
from jsonmend.core.services.document_loader import REPAIRED_ADVISORY
from jsonmend.core.services.repair_engine import RepairEngine

EXIT_OK = 0
EXIT_REPAIR_FAILED = 1
EXIT_USAGE = 2
EXIT_NEEDS_REPAIR = 3

DEFAULT_ENV_FILE = ".env"

logger = get_logger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="jsonmend",
        description="Repair malformed JSON-like text into strictly valid JSON",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File to repair (reads stdin when omitted or '-')",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="FILE",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        metavar="FILE",
        default=DEFAULT_ENV_FILE,
        help="Environment file with JSONMEND_* settings (default: .env, skipped if absent)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Write repaired JSON to FILE instead of stdout",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the input needs repair (exit 0 valid, 3 repairable, 1 unrepairable)",
    )
    parser.add_argument(
        "--balance-literal-aware",
        dest="balance_literal_aware",
        action="store_const",
        const=True,
        default=None,
        help="Ignore brackets inside string literals when balancing",
    )
    parser.add_argument(
        "--no-rules-literal-aware",
        dest="rules_literal_aware",
        action="store_const",
        const=False,
        default=None,
        help="Apply syntax rules to the whole buffer, string literals included",
    )
    parser.add_argument(
        "--no-wrap",
        dest="wrap_top_level_sequence",
        action="store_const",
        const=False,
        default=None,
        help="Do not wrap comma-separated top-level values in an array",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Logging level",
    )
    return parser


def apply_cli_args(
    config: AppConfig,
    args: argparse.Namespace,
    resolution: ParameterResolution | None = None,
) -> AppConfig:
    """Overlay command-line flags on ``config``."""
    repair_updates = {
        name: getattr(args, name)
        for name in (
            "rules_literal_aware",
            "balance_literal_aware",
            "wrap_top_level_sequence",
        )
        if getattr(args, name) is not None
    }
    logging_updates = {"level": LogLevel(args.log_level)} if args.log_level else {}

    if resolution is not None:
        for name, value in repair_updates.items():
            resolution.record(f"repair.{name}", value, ParameterSource.CLI)
        if logging_updates:
            resolution.record(
                "logging.level", args.log_level, ParameterSource.CLI, origin="--log-level"
            )

    return config.model_copy(
        update={
            "repair": config.repair.model_copy(update=repair_updates),
            "logging": config.logging.model_copy(update=logging_updates),
        }
    )


def _read_input(path: str | None, stdin: TextIO) -> str:
    if path is None or path == "-":
        return stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_cli_parser().parse_args(argv)
    resolution = ParameterResolution()

    try:
        config = load_config(
            args.config_file, resolution=resolution, dotenv_path=args.env_file
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=stderr)
        return EXIT_USAGE
    config = apply_cli_args(config, args, resolution)

    configure_logging_with_environment_tagging(
        level=getattr(logging, config.logging.level.value),
        log_file=config.logging.log_file,
    )

    try:
        text = _read_input(args.path, stdin)
    except OSError as e:
        print(f"Unable to read {args.path}: {e.strerror or e}", file=stderr)
        return EXIT_USAGE

    engine = RepairEngine(config.repair)
    try:
        result = engine.repair(text)
    except JsonRepairError as e:
        logger.info("repair_failed", source=args.path or "<stdin>", error=e.message)
        if not args.check:
            print(f"JSON Repair Error: {e.message}", file=stderr)
        return EXIT_REPAIR_FAILED

    logger.debug(
        "repair_finished",
        source=args.path or "<stdin>",
        status=result.status.value,
        applied_rules=list(result.applied_rules),
    )

    if args.check:
        return EXIT_NEEDS_REPAIR if result.changed else EXIT_OK

    if result.changed:
        print(REPAIRED_ADVISORY, file=stderr)

    output = result.text or ""
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        stdout.write(output)
        if not output.endswith("\n"):
            stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
