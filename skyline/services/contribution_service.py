import base64
import binascii
import logging
from datetime import datetime

from skyline.api.schemas.github import ContributionCalendar
from skyline.api.schemas.github import ContributionQueryResponse
from skyline.api.schemas.github import IdQueryResponse
from skyline.errors import InvalidDayError
from skyline.errors import InvalidWeekError
from skyline.errors import NoUserFoundError
from skyline.errors import QueryError
from skyline.github_api import CONTRIBUTION_QUERY
from skyline.github_api import GitHubGraphQLClient
from skyline.github_api import ID_QUERY
from skyline.models import ContributionRecord
from skyline.timestamps import year_to_git_timestamp

logger = logging.getLogger(__name__)

MAX_DAY_INDEX = 7
MAX_WEEK_INDEX = 53


def decode_user_id(raw_id: str) -> str:
    """Decode a base64 GitHub node id into its UTF-8 text form."""

    try:
        return base64.b64decode(raw_id, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise QueryError(f"GitHub user id {raw_id!r} is not base64 text") from exc


def get_user_id(username: str, client: GitHubGraphQLClient) -> str | None:
    """Resolve a username to its decoded node id, or None if there is no such user."""

    response = client.execute(ID_QUERY, {"username": username}, IdQueryResponse)
    if response.user is None:
        logger.debug("No GitHub user found for %s", username)
        return None
    return decode_user_id(response.user.id)


def flatten_calendar(calendar: ContributionCalendar) -> list[ContributionRecord]:
    """Walk calendar weeks and days in delivery order into flat records.

    Raises:
        InvalidDayError: If a week carries an eighth day or more.
        InvalidWeekError: If the calendar carries a 55th week or more.
    """

    contributions: list[ContributionRecord] = []
    current_week = 0
    for week in calendar.weeks:
        current_day = 0
        logger.debug("Week %d", current_week)
        for day in week.contribution_days:
            logger.debug("%s %d", day.date, day.contribution_count)
            contributions.append(
                ContributionRecord(
                    week=current_week,
                    day=current_day,
                    count=day.contribution_count,
                    color=day.color,
                    date=day.date,
                )
            )
            current_day += 1
            if current_day > MAX_DAY_INDEX:
                raise InvalidDayError(current_day, day.date)
        current_week += 1
        if current_week > MAX_WEEK_INDEX:
            raise InvalidWeekError(current_week)

    return contributions


def get_contributions(
    username: str,
    year: int,
    client: GitHubGraphQLClient,
    now: datetime | None = None,
) -> list[ContributionRecord]:
    """Fetch one year of contribution days for a user as flat records.

    Raises:
        InvalidYearError: If the year is rejected; no request is sent.
        NoUserFoundError: If GitHub returns no user.
        QueryError: If the request fails.
    """

    start, end = year_to_git_timestamp(year, now=now)
    response = client.execute(
        CONTRIBUTION_QUERY,
        {"username": username, "startDate": start, "endDate": end},
        ContributionQueryResponse,
    )
    if response.user is None:
        raise NoUserFoundError(username)

    calendar = response.user.contributions_collection.contribution_calendar
    return flatten_calendar(calendar)
