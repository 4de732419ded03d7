from pydantic import BaseModel
from pydantic import Field


class IdUser(BaseModel):
    """User node returned by the id query."""

    id: str


class IdQueryResponse(BaseModel):
    """`data` payload of the id query."""

    user: IdUser | None = None


class ContributionDay(BaseModel):
    """Single calendar cell as delivered by GitHub."""

    date: str
    contribution_count: int = Field(alias="contributionCount", ge=0)
    color: str


class ContributionWeek(BaseModel):
    """Calendar column holding the days of one week."""

    contribution_days: list[ContributionDay] = Field(alias="contributionDays")


class ContributionCalendar(BaseModel):
    weeks: list[ContributionWeek]


class ContributionsCollection(BaseModel):
    contribution_calendar: ContributionCalendar = Field(alias="contributionCalendar")


class ContributionUser(BaseModel):
    contributions_collection: ContributionsCollection = Field(
        alias="contributionsCollection"
    )


class ContributionQueryResponse(BaseModel):
    """`data` payload of the contribution calendar query."""

    user: ContributionUser | None = None
