from datetime import datetime
from datetime import UTC

from skyline.errors import InvalidYearError
from skyline.models import DateRange

# Earliest year GitHub has contribution data for.
FIRST_YEAR = 2008


def year_to_git_timestamp(year: int, now: datetime | None = None) -> DateRange:
    """Convert a past calendar year into GitHub DateTime bounds.

    Only years from 2008 up to, but excluding, the current UTC year are
    accepted.

    Raises:
        InvalidYearError: If the year is out of range.
    """

    current_year = (now or datetime.now(UTC)).year
    if year < FIRST_YEAR or year >= current_year:
        raise InvalidYearError(year)

    return DateRange(
        start=f"{year}-01-01T00:00:00Z",
        end=f"{year}-12-31T11:59:59Z",
    )
