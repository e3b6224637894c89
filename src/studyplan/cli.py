"""CLI entrypoint for the study planner."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Any

from loguru import logger

from studyplan.engine import run_planner
from studyplan.io import read_json, write_json
from studyplan.logger import setup_logger
from studyplan.normalization import DEFAULT_PLAN_CONFIG
from studyplan.reporting import (
    build_error_report,
    build_error_report_with_validation,
    build_success_report,
    render_timetable,
)
from studyplan.validation import PlanValidationError, ValidationError, ValidationReport


def _resolve_input_path(request_file: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (request_file.parent / path).resolve()


def _load_request(request_path: str) -> dict[str, Any]:
    """Read the request JSON; ``subjects_path`` is resolved against the request file.

    Raises:
        PlanValidationError: when the request cannot be read.
    """
    try:
        request = read_json(request_path)
    except (OSError, ValueError) as exc:
        raise PlanValidationError(
            [ValidationError(code="invalid_request", message=str(exc), path="$.request")]
        ) from exc

    subjects_path = request.get("subjects_path")
    if isinstance(subjects_path, str) and subjects_path.strip():
        request["subjects_path"] = str(_resolve_input_path(Path(request_path), subjects_path.strip()))
    return request


def run_plan_command(request_path: str, output_path: str, today: date | None = None) -> int:
    validation_report = ValidationReport()

    try:
        request = _load_request(request_path)
    except PlanValidationError as exc:
        write_json(output_path, build_error_report(exc.errors, code="request_read_error"))
        return 2

    try:
        result = run_planner(request, today=today, validation_report=validation_report)
    except PlanValidationError as exc:
        logger.error(f"Plan request rejected: {exc}")
        write_json(
            output_path,
            build_error_report_with_validation(exc.errors, validation_report=validation_report),
        )
        return 2

    write_json(output_path, build_success_report(result))
    return 0


def run_show_command(request_path: str, today: date | None = None) -> int:
    try:
        request = _load_request(request_path)
        result = run_planner(request, today=today)
    except PlanValidationError as exc:
        for error in exc.errors:
            print(f"error: {error.message} ({error.path})", file=sys.stderr)
        return 2

    config = result["effective_config"]
    sys.stdout.write(
        render_timetable(
            result["plan"],
            start_minutes=config.get("day_start_minutes", DEFAULT_PLAN_CONFIG["day_start_minutes"]),
            gap_minutes=config.get("slot_gap_minutes", DEFAULT_PLAN_CONFIG["slot_gap_minutes"]),
        )
    )
    for warning in result["warnings"]:
        print(f"warning: {warning['message']}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studyplan", description="Exam study schedule generator")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Generate a plan from plan_request JSON")
    plan_parser.add_argument("--request", required=True, help="Path to plan_request.json")
    plan_parser.add_argument("--output", required=True, help="Path to plan_output.json")
    plan_parser.add_argument("--today", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD), defaults to today")

    show_parser = subparsers.add_parser("show", help="Print the timetable for a plan_request JSON")
    show_parser.add_argument("--request", required=True, help="Path to plan_request.json")
    show_parser.add_argument("--today", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD), defaults to today")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(level="DEBUG" if args.debug else "INFO", log_file=args.log_file)

    if args.command == "plan":
        return run_plan_command(args.request, args.output, today=args.today)
    if args.command == "show":
        return run_show_command(args.request, today=args.today)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
