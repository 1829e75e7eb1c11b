from __future__ import annotations

import argparse
import importlib
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, Settings, build_container
from .core.exceptions import DomainError, ValidationError

logger = logging.getLogger("society_attendance")


def load_settings() -> Settings:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    try:
        module = importlib.import_module(settings_module)
    except ValueError as exc:
        raise ValidationError(f"Invalid value in {settings_module}: {exc}") from exc
    return Settings.from_module(module)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="society-attendance",
        description="Weekly attendance, rounds and novice feedback reports for a debate society.",
    )
    refresh_help = "re-fetch events and debaters even if cached"
    parser.add_argument("--refresh", action="store_true", help=refresh_help)
    sub = parser.add_subparsers(dest="command", required=True)

    # accepted after the subcommand too; SUPPRESS keeps the top-level value when omitted
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--refresh", action="store_true", default=argparse.SUPPRESS, help=refresh_help)

    for name, help_text in (
        ("attendance", "weekly attendance and participation percentages"),
        ("rounds", "per-round participant lists"),
    ):
        p = sub.add_parser(name, help=help_text, parents=[common])
        p.add_argument("--start", help="first day of the report, YYYY-MM-DD")
        p.add_argument("--end", help="day after the report ends, YYYY-MM-DD")
        p.add_argument("--society", help="society/club id to report on")
        p.add_argument("--no-excel", action="store_true", help="skip the spreadsheet export")

    sub.add_parser("feedback", help="judge feedback for novice debaters", parents=[common])
    sub.add_parser("fetch", help="only refresh the local record cache")
    return parser


def run_attendance(container: Container, args: argparse.Namespace) -> None:
    settings = container.settings
    records = container.record_loader.load(refresh=args.refresh)
    logger.info("Calculating attendance...")
    report = container.attendance_service.build_report(
        records.events,
        records.participants,
        settings.date_range(start=args.start, end=args.end),
        args.society or settings.society_id,
    )
    container.export_service.export_attendance(report, excel=not args.no_excel)


def run_rounds(container: Container, args: argparse.Namespace) -> None:
    settings = container.settings
    records = container.record_loader.load(refresh=args.refresh)
    logger.info("Generating rounds...")
    rounds = container.rounds_service.build_rounds(
        records.events,
        records.participants,
        settings.date_range(start=args.start, end=args.end),
        args.society or settings.society_id,
    )
    container.export_service.export_rounds(rounds, excel=not args.no_excel)


def run_feedback(container: Container, args: argparse.Namespace) -> None:
    records = container.record_loader.load(refresh=args.refresh)
    logger.info("Starting feedback collection...")
    feedback = container.feedback_service.collect(records.participants, records.events)
    path = container.export_service.export_feedback(feedback)
    logger.info("Feedback collection complete, results written to %s", path)


def run_fetch(container: Container, args: argparse.Namespace) -> None:
    container.record_loader.retrieve(refresh=True)


COMMANDS = {
    "attendance": run_attendance,
    "rounds": run_rounds,
    "feedback": run_feedback,
    "fetch": run_fetch,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except DomainError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", exc)
        return 2

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s (settings=%s)", args.command, get_settings_module())

    settings.output_dir.mkdir(parents=True, exist_ok=True)
    try:
        container = build_container(settings)
        COMMANDS[args.command](container, args)
    except DomainError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
