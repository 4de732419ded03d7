"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import date
from datetime import timedelta

import httpx

from skyline.github_api import GitHubGraphQLClient

GRAPHQL_URL = "https://api.github.test/graphql"

Handler = Callable[[httpx.Request], httpx.Response]


def calendar_weeks(
    week_lengths: list[int],
    start: date = date(2020, 1, 1),
    count: int = 0,
    color: str = "#ebedf0",
) -> list[dict[str, object]]:
    """Build GitHub-shaped calendar weeks with consecutive dates."""

    weeks: list[dict[str, object]] = []
    current = start
    for length in week_lengths:
        days = []
        for _ in range(length):
            days.append(
                {
                    "date": current.isoformat(),
                    "contributionCount": count,
                    "color": color,
                }
            )
            current += timedelta(days=1)
        weeks.append({"contributionDays": days})
    return weeks


def contribution_payload(weeks: list[dict[str, object]]) -> dict[str, object]:
    return {
        "data": {
            "user": {
                "contributionsCollection": {"contributionCalendar": {"weeks": weeks}}
            }
        }
    }


def id_payload(raw_id: str | None) -> dict[str, object]:
    return {"data": {"user": None if raw_id is None else {"id": raw_id}}}


def make_client(handler: Handler) -> GitHubGraphQLClient:
    http_client = httpx.Client(
        transport=httpx.MockTransport(handler),
        headers={"Authorization": "Bearer token"},
    )
    return GitHubGraphQLClient(graphql_url=GRAPHQL_URL, http_client=http_client)


class GraphQLRecorder:
    """Answer GraphQL requests by operation name and record their variables."""

    def __init__(self, responses: dict[str, httpx.Response]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, dict[str, object]]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content.decode())
        operation = "ContributionQuery" if "ContributionQuery" in body["query"] else "IdQuery"
        self.calls.append((operation, body["variables"]))
        return self.responses[operation]
