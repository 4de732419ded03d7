class SkylineError(Exception):
    """Base class for every failure surfaced to the CLI or API."""


class MissingCredentialError(SkylineError):
    """Raised when no GitHub API token is configured."""


class InvalidYearError(SkylineError):
    """Raised when a requested year is outside the supported range."""

    def __init__(self, year: int) -> None:
        super().__init__("Invalid Year")
        self.year = year


class QueryError(SkylineError):
    """Raised when a GraphQL request fails or GitHub reports errors."""


class InvalidTokenError(QueryError):
    """Raised when GitHub rejects the provided token."""


class NoUserFoundError(SkylineError):
    """Raised when GitHub returns no user for a contribution query."""

    def __init__(self, username: str) -> None:
        super().__init__("No user found")
        self.username = username


class InvalidDayError(SkylineError):
    """Raised when a calendar week holds more days than allowed."""

    def __init__(self, day: int, date: str) -> None:
        super().__init__(f"Invalid day {day} from date {date}")
        self.day = day
        self.date = date


class InvalidWeekError(SkylineError):
    """Raised when a calendar holds more weeks than allowed."""

    def __init__(self, week: int) -> None:
        super().__init__(f"Invalid week {week}")
        self.week = week
