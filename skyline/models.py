from dataclasses import dataclass
from typing import NamedTuple


class DateRange(NamedTuple):
    """Inclusive UTC timestamp bounds passed to the contribution query."""

    start: str
    end: str


@dataclass(frozen=True)
class ContributionRecord:
    """One contribution day flattened out of the weekly calendar."""

    week: int
    day: int
    count: int
    color: str
    date: str
