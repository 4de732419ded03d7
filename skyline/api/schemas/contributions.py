from pydantic import BaseModel


class ContributionRecordOut(BaseModel):
    """Flattened contribution day used in the contributions response."""

    week: int
    day: int
    date: str
    count: int
    color: str


class ContributionsResponse(BaseModel):
    """Contribution records for one user and one year."""

    username: str
    year: int
    start: str
    end: str
    total: int
    records: list[ContributionRecordOut]


class UserIdResponse(BaseModel):
    """Decoded GitHub node id, or null when the user does not exist."""

    username: str
    id: str | None
