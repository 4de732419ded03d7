from collections.abc import Generator

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Request
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials

from skyline.api.schemas.contributions import ContributionRecordOut
from skyline.api.schemas.contributions import ContributionsResponse
from skyline.api.schemas.contributions import UserIdResponse
from skyline.core.security import bearer_scheme
from skyline.core.security import resolve_github_token
from skyline.errors import InvalidDayError
from skyline.errors import InvalidTokenError
from skyline.errors import InvalidWeekError
from skyline.errors import InvalidYearError
from skyline.errors import NoUserFoundError
from skyline.errors import QueryError
from skyline.github_api import GitHubGraphQLClient
from skyline.services.contribution_service import get_contributions
from skyline.services.contribution_service import get_user_id
from skyline.settings import Settings
from skyline.timestamps import year_to_git_timestamp


router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_graphql_client(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Generator[GitHubGraphQLClient, None, None]:
    token = resolve_github_token(credentials, settings.github_api_token)
    client = GitHubGraphQLClient.create(token, settings)
    try:
        yield client
    finally:
        client.close()


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/users/{username}/id")
def read_user_id(
    username: str,
    client: GitHubGraphQLClient = Depends(get_graphql_client),
) -> UserIdResponse:
    """Return the decoded GitHub node id for a username."""

    try:
        user_id = get_user_id(username, client)
    except InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except QueryError as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc

    return UserIdResponse(username=username, id=user_id)


@router.get("/contributions/{username}")
def read_contributions(
    username: str,
    year: int = Query(...),
    client: GitHubGraphQLClient = Depends(get_graphql_client),
) -> ContributionsResponse:
    """Return flattened contribution days of one past year for a user."""

    try:
        date_range = year_to_git_timestamp(year)
        records = get_contributions(username, year, client)
    except InvalidYearError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NoUserFoundError as exc:
        raise HTTPException(status_code=404, detail="user not found") from exc
    except InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except (QueryError, InvalidDayError, InvalidWeekError) as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc

    return ContributionsResponse(
        username=username,
        year=year,
        start=date_range.start,
        end=date_range.end,
        total=sum(record.count for record in records),
        records=[
            ContributionRecordOut(
                week=record.week,
                day=record.day,
                date=record.date,
                count=record.count,
                color=record.color,
            )
            for record in records
        ],
    )
