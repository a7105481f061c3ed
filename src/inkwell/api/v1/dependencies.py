"""Shared API dependencies for authentication and result handling."""

from typing import Annotated, TypeVar

from fastapi import Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inkwell.core.errors import AccessError, AuthError, ErrorKind
from inkwell.core.results import Failure, Ok, Result
from inkwell.schemas.user import AuthUser
from inkwell.services.access import AccessLayer
from inkwell.services.container import Services, get_services
from inkwell.services.identity import IdentityProvider

T = TypeVar("T")

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)

ServicesDep = Annotated[Services, Depends(get_services)]

STALE_HEADER = "X-Cache-Stale"

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.AUTH: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorKind.STORE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.ALREADY_RESOLVED: status.HTTP_409_CONFLICT,
}


def get_access_layer(services: ServicesDep) -> AccessLayer:
    return services.access


def get_identity(services: ServicesDep) -> IdentityProvider:
    return services.identity


AccessDep = Annotated[AccessLayer, Depends(get_access_layer)]
IdentityDep = Annotated[IdentityProvider, Depends(get_identity)]


def http_error(failure: Failure | AccessError) -> HTTPException:
    """Build the HTTP error matching the failure's kind."""
    return HTTPException(
        status_code=_STATUS_BY_KIND.get(failure.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={"kind": failure.kind.value, "message": failure.message},
    )


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise for a ``Failure``.

    Args:
        result: Outcome of an access layer operation

    Returns:
        The wrapped value

    Raises:
        HTTPException: If the operation failed
    """
    if isinstance(result, Ok):
        return result.value
    raise http_error(result)


def unwrap_read(result: Result[T], response: Response) -> T:
    """Like :func:`unwrap`, flagging values served from an expired cache entry."""
    value = unwrap(result)
    if isinstance(result, Ok) and result.stale:
        response.headers[STALE_HEADER] = "1"
    return value


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    identity: IdentityDep,
) -> AuthUser:
    """Get the current authenticated user from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials
        identity: Identity provider holding sessions

    Returns:
        The signed-in user

    Raises:
        HTTPException: If the token is invalid, revoked or its user is gone
    """
    try:
        return identity.current_user(credentials.credentials)
    except AuthError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


def get_optional_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(optional_bearer_scheme)
    ],
    identity: IdentityDep,
) -> AuthUser | None:
    """Like :func:`get_current_user`, but anonymous callers get ``None``."""
    if credentials is None:
        return None
    return get_current_user(credentials, identity)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    return credentials.credentials


# Type aliases for user dependencies
CurrentUserDep = Annotated[AuthUser, Depends(get_current_user)]
OptionalUserDep = Annotated[AuthUser | None, Depends(get_optional_user)]
TokenDep = Annotated[str, Depends(get_bearer_token)]
