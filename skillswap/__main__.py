"""Main entry point for SkillSwap."""

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from skillswap import __version__
from skillswap.config.settings import Settings
from skillswap.utils.logging import configure_logging, get_logger


def _score(value: str) -> float:
    score = float(value)
    if not (0.0 <= score <= 100.0):
        raise argparse.ArgumentTypeError("--min-score must be between 0 and 100")
    return score


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("--limit must be a positive integer")
    return number


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _resolve_run_dir(
    settings: Settings, *, prefix: str, out_run_dir: Path | None
) -> Path:
    if out_run_dir is not None:
        run_dir = out_run_dir
    else:
        run_dir = settings.output_dir / "runs" / _timestamp_run_id(prefix)
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _write_json(path: Path, payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    path.write_text(
        json.dumps(payload, indent=2, default=_default),
        encoding="utf-8",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="skillswap",
        description="SkillSwap: skill-exchange match scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m skillswap matches data/skills.yaml --user u1
  python -m skillswap matches data/skills.yaml --user u1 --category Design --min-score 80
  python -m skillswap partners data/skills.yaml --user u1
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available operating modes",
    )

    matches_parser = subparsers.add_parser(
        "matches",
        help="Score a user's skills against everyone else's",
    )
    matches_parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="Skill directory file (YAML/JSON); defaults to DIRECTORY_PATH",
    )
    matches_parser.add_argument("--user", required=True, help="Requesting user id")
    matches_parser.add_argument(
        "--category",
        default=None,
        help="Boost candidates in this category",
    )
    matches_parser.add_argument(
        "--level",
        default=None,
        help="Boost candidates at this level",
    )
    matches_parser.add_argument(
        "--min-score",
        type=_score,
        default=None,
        help="Drop matches below this score (0-100, applied after the threshold)",
    )
    matches_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Write matches.json here instead of a timestamped run directory",
    )

    partners_parser = subparsers.add_parser(
        "partners",
        help="Suggest exchange partners by overlapping offers and wants",
    )
    partners_parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="Skill directory file (YAML/JSON); defaults to DIRECTORY_PATH",
    )
    partners_parser.add_argument("--user", required=True, help="Requesting user id")
    partners_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=10,
        help="Maximum number of partners to list",
    )
    partners_parser.add_argument(
        "--out-run-dir",
        type=Path,
        default=None,
        help="Write partners.json here instead of a timestamped run directory",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    configure_logging(level=log_level)
    logger = get_logger("cli")

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"SkillSwap v{__version__} starting in {parsed.mode} mode")

    from skillswap.matching.directory import SkillDirectoryService, UserNotFoundError
    from skillswap.matching.service import MatchingService

    try:
        service = MatchingService()
    except ValidationError as e:
        logger.error(f"Invalid matching configuration: {e}")
        return 1

    try:
        directory = SkillDirectoryService(settings).load(parsed.directory)
    except (FileNotFoundError, ValueError) as e:
        # pydantic's ValidationError is a ValueError.
        logger.error(f"Could not load skill directory: {e}")
        return 1

    if parsed.mode == "matches":
        try:
            report = service.build_match_report(
                parsed.user,
                directory,
                category=parsed.category,
                level=parsed.level,
                min_score=parsed.min_score,
            )
        except UserNotFoundError as e:
            logger.error(str(e))
            return 1

        run_dir = _resolve_run_dir(
            settings, prefix="matches", out_run_dir=parsed.out_run_dir
        )
        _write_json(run_dir / "matches.json", report)

        print(f"Matches for {parsed.user}: {report.user_stats.total_matches}")
        for match in report.matches:
            print(
                f"  {match.score:5.1f}  {match.skill_title} "
                f"({match.skill_category}, {match.skill_level}) - {match.user_name}"
            )
        print(
            f"Average compatibility: {report.analysis.average_compatibility:.1f}"
        )
        for recommendation in report.analysis.recommendations:
            print(f"- {recommendation}")
        for notification in report.notifications:
            print(f"[{notification.priority.value}] {notification.message}")
        print(f"Wrote: {run_dir / 'matches.json'}")
        return 0

    if parsed.mode == "partners":
        try:
            partners = service.find_partner_matches(
                parsed.user, directory, limit=parsed.limit
            )
        except UserNotFoundError as e:
            logger.error(str(e))
            return 1

        run_dir = _resolve_run_dir(
            settings, prefix="partners", out_run_dir=parsed.out_run_dir
        )
        _write_json(run_dir / "partners.json", {"matches": partners})

        print(f"Partners for {parsed.user}: {len(partners)}")
        for partner in partners:
            print(
                f"  {partner.match_score:3d}  {partner.user.name}: "
                f"{partner.match_reasons}"
            )
        print(f"Wrote: {run_dir / 'partners.json'}")
        return 0

    logger.error(f"Unknown mode: {parsed.mode}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
