from fastapi import Depends

from dojo_api.core.auth_context import get_current_token
from dojo_api.core.config import Settings, get_settings
from dojo_api.core.errors import InvalidTokenError
from dojo_api.core.security import decode_access_token
from dojo_api.core.session import SessionContext


def get_current_session(
    token: str = Depends(get_current_token),
    settings: Settings = Depends(get_settings),
) -> SessionContext:
    payload = decode_access_token(token, settings)

    try:
        return SessionContext(
            user_id=int(payload["id"]),
            email=payload["email"],
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError) as e:
        # signed by us but not a session token
        raise InvalidTokenError() from e
