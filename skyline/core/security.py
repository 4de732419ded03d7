from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security import HTTPBearer


bearer_scheme = HTTPBearer(auto_error=False)


def resolve_github_token(
    credentials: HTTPAuthorizationCredentials | None,
    fallback_token: str | None,
) -> str:
    """Pick the caller's Bearer token, falling back to the configured one.

    Raises:
        HTTPException: If neither a usable Bearer token nor a fallback exists.
    """

    if credentials is not None:
        if credentials.scheme.lower() != "bearer" or not credentials.credentials.strip():
            raise HTTPException(
                status_code=401,
                detail="Authorization Bearer token is required",
            )
        return credentials.credentials.strip()

    if fallback_token and fallback_token.strip():
        return fallback_token.strip()

    raise HTTPException(
        status_code=401,
        detail="Authorization Bearer token is required",
    )
