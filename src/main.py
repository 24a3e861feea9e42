# src/main.py — v2
"""CLI entry point — predict, batch, skills, regions, job commands.

Usage:
    skillsalary predict React TypeScript Node.js --region US --experience 5
    skillsalary batch skill_sets.json --region EU
    skillsalary skills
    skillsalary regions
    skillsalary job Python TensorFlow --webhook https://example.com/hook
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from skillsalary.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        from skillsalary.config.settings import load_settings

        settings = load_settings()
        _setup_logging(settings, args.verbose)
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="skillsalary",
        description=f"skillsalary v{__version__} — skill-based salary estimation",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- predict ---
    p_predict = subparsers.add_parser("predict", help="Estimate salary for one skill set")
    p_predict.add_argument("skills", nargs="+", help="Skill names, e.g. React Node.js")
    _add_profile_args(p_predict)
    p_predict.set_defaults(func=_cmd_predict)

    # --- batch ---
    p_batch = subparsers.add_parser(
        "batch", help="Estimate salaries for a JSON list of skill lists",
    )
    p_batch.add_argument("file", type=Path, help="JSON file: [[\"React\"], [\"Go\", \"gRPC\"]]")
    _add_profile_args(p_batch)
    p_batch.set_defaults(func=_cmd_batch)

    # --- skills / regions ---
    p_skills = subparsers.add_parser("skills", help="List supported skill keys")
    p_skills.set_defaults(func=_cmd_skills)
    p_regions = subparsers.add_parser("regions", help="List supported region codes")
    p_regions.set_defaults(func=_cmd_regions)

    # --- job ---
    p_job = subparsers.add_parser(
        "job", help="Run a prediction through the job queue and print the job record",
    )
    p_job.add_argument("skills", nargs="+", help="Skill names")
    _add_profile_args(p_job)
    p_job.add_argument("--webhook", default=None, help="Webhook URL notified on completion")
    p_job.set_defaults(func=_cmd_job)

    return parser


def _add_profile_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-r", "--region", default=None, help="Region code (default: from settings)")
    p.add_argument(
        "-e", "--experience", type=float, default=None,
        help="Years of experience (default: from settings)",
    )


async def _cmd_predict(args: argparse.Namespace, settings) -> int:
    from skillsalary.api.facade import PredictionService

    service = PredictionService(settings)
    predictor = service.create_predictor(args.region, args.experience)
    result = await predictor.predict_async(args.skills)
    _print_json(result.model_dump(mode="json", by_alias=True))
    return 0


async def _cmd_batch(args: argparse.Namespace, settings) -> int:
    from skillsalary.api.facade import PredictionService

    file_path: Path = args.file
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        return 1
    skill_sets = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(skill_sets, list) or not all(isinstance(s, list) for s in skill_sets):
        logger.error("Expected a JSON list of skill lists in %s", file_path)
        return 1

    service = PredictionService(settings)
    predictor = service.create_predictor(args.region, args.experience)
    results = await predictor.batch_predict_async(skill_sets)
    _print_json([r.model_dump(mode="json", by_alias=True) for r in results])
    return 0


async def _cmd_skills(args: argparse.Namespace, settings) -> int:
    from skillsalary.api.facade import PredictionService

    for skill in await PredictionService(settings).supported_skills():
        print(skill)
    return 0


async def _cmd_regions(args: argparse.Namespace, settings) -> int:
    from skillsalary.api.facade import PredictionService

    for region in await PredictionService(settings).supported_regions():
        print(region)
    return 0


async def _cmd_job(args: argparse.Namespace, settings) -> int:
    from skillsalary.api.facade import JobService
    from skillsalary.api.models import JobRequest

    service = JobService(settings)
    request = JobRequest(
        skills=args.skills,
        region=args.region or settings.default_region,
        experience_years=(
            settings.default_experience_years if args.experience is None else args.experience
        ),
        webhook_url=args.webhook,
    )
    ticket = service.schedule_job(request)
    logger.info("Scheduled %s", ticket.job_id)
    queue = service.get_job_queue()
    try:
        await queue.drain()
    finally:
        await service.stop()

    job = service.get_job(ticket.job_id)
    _print_json(job.model_dump(mode="json", by_alias=True))
    return 0 if job.status == "completed" else 1


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _setup_logging(settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from skillsalary.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format="text" if verbose else settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
