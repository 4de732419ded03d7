"""Command-line entry point: fetch a user's contribution calendar for a year.

Environment:
  GITHUB_API_TOKEN  - required, sent as the Bearer token to the GitHub GraphQL API

Usage:
  skylineg --user octocat --year 2020
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from skyline.core.app_logging import configure_logging
from skyline.core.observability import init_sentry
from skyline.errors import SkylineError
from skyline.github_api import GitHubGraphQLClient
from skyline.services.contribution_service import get_contributions
from skyline.services.contribution_service import get_user_id
from skyline.settings import Settings

__version__ = "0.0.1"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skylineg",
        description="A CLI app to generate github skyline",
    )
    parser.add_argument("-u", "--user", required=True, help="GitHub username")
    parser.add_argument(
        "-y", "--year", required=True, type=int, help="Calendar year to fetch"
    )
    parser.add_argument(
        "--days",
        action="store_true",
        help="Print every contribution day, not only the total number of days",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each week and day fetched"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
        configure_logging("DEBUG" if args.verbose else settings.log_level.upper())
    except (ValidationError, ValueError) as exc:
        print(f"Error: Invalid configuration: {exc}", file=sys.stderr)
        return 1
    init_sentry(settings, entry_point="cli")

    try:
        token = settings.require_token()
        with GitHubGraphQLClient.create(token, settings) as client:
            user_id = get_user_id(args.user, client)
            if user_id is not None:
                print(user_id)

            contributions = get_contributions(args.user, args.year, client)
    except SkylineError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.days:
        for record in contributions:
            print(record.week, record.day, record.date, record.count, record.color)
    print(len(contributions))
    return 0


if __name__ == "__main__":
    sys.exit(main())
