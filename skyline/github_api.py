from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError

from skyline.errors import InvalidTokenError
from skyline.errors import QueryError
from skyline.settings import Settings

ResponseT = TypeVar("ResponseT", bound=BaseModel)

ID_QUERY = """
query IdQuery($username: String!) {
  user(login: $username) {
    id
  }
}
"""

CONTRIBUTION_QUERY = """
query ContributionQuery($username: String!, $startDate: DateTime!, $endDate: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $startDate, to: $endDate) {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
            color
          }
        }
      }
    }
  }
}
"""


@dataclass
class GitHubGraphQLClient:
    """Authenticated client for the GitHub GraphQL endpoint."""

    graphql_url: str
    http_client: httpx.Client

    @classmethod
    def create(cls, token: str, settings: Settings) -> "GitHubGraphQLClient":
        """Create a client that sends the token as a Bearer header."""

        http_client = httpx.Client(
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "User-Agent": settings.user_agent,
            },
            timeout=settings.http_timeout_seconds,
        )
        return cls(graphql_url=settings.github_graphql_url, http_client=http_client)

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        response_model: type[ResponseT],
    ) -> ResponseT:
        """Run one GraphQL query and parse its `data` into `response_model`.

        Raises:
            InvalidTokenError: If GitHub rejects the token (401/403).
            QueryError: If the request fails, GitHub reports errors, or the
                payload does not match `response_model`.
        """

        try:
            response = self.http_client.post(
                self.graphql_url,
                json={"query": query, "variables": dict(variables)},
            )
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code in {401, 403}:
                raise InvalidTokenError("GitHub token is invalid") from exc
            raise QueryError(
                f"GitHub GraphQL request failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise QueryError("GitHub GraphQL request failed") from exc
        except ValueError as exc:
            raise QueryError("GitHub GraphQL response is not JSON") from exc

        if not isinstance(payload, Mapping):
            raise QueryError("GitHub GraphQL response is invalid")

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = [
                str(error.get("message", error)) if isinstance(error, Mapping) else str(error)
                for error in errors
            ]
            raise QueryError(f"GitHub GraphQL returned errors: {'; '.join(messages)}")

        data = payload.get("data")
        if not isinstance(data, Mapping):
            raise QueryError("GitHub GraphQL data is missing")

        try:
            return response_model.model_validate(data)
        except ValidationError as exc:
            raise QueryError("GitHub GraphQL data has an unexpected shape") from exc

    def close(self) -> None:
        """Close the underlying HTTP session."""

        self.http_client.close()

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
