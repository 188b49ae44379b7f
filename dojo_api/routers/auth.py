from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dojo_api.core.config import Settings, get_settings
from dojo_api.db.session import get_db
from dojo_api.schemas.auth import LoginRequest, LoginResponse, UserSummary
from dojo_api.services.auth_service import authenticate

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, user = authenticate(db, settings, body.email, body.password)

    # password_hash never leaves the service
    return LoginResponse(
        token=token,
        user=UserSummary(
            id=user.id,
            email=user.email,
            role=user.role,
            dojo_name=user.dojo_name,
            logo=user.logo_url,
        ),
    )
