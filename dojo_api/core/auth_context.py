from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from dojo_api.core.errors import UnauthenticatedError

# auto_error=False: missing credentials are reported through UnauthenticatedError
security = HTTPBearer(auto_error=False)


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    # HTTPBearer returns None for a missing header or a non-Bearer scheme
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()

    return credentials.credentials
