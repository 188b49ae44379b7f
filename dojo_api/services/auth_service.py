from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dojo_api.core.config import Settings
from dojo_api.core.errors import (
    IncorrectPasswordError,
    TransientFailureError,
    UserNotFoundError,
)
from dojo_api.core.logger import logger
from dojo_api.core.security import create_access_token, verify_password
from dojo_api.models import User


def get_user_by_email(db: Session, email: str):
    try:
        return db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.exception("USER LOOKUP FAILED | email=%s", email)
        raise TransientFailureError() from e


def build_session_claims(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "role": user.role,
    }


def authenticate(db: Session, settings: Settings, email: str, password: str):
    """
    Check credentials and issue a session token.

    Returns (token, user). Raises UserNotFoundError / IncorrectPasswordError
    for the two login failure modes.
    """
    user = get_user_by_email(db, email)
    if not user:
        logger.warning("LOGIN FAILED | reason=unknown_user | email=%s", email)
        raise UserNotFoundError()

    if not verify_password(password, user.password_hash):
        logger.warning("LOGIN FAILED | reason=bad_password | user_id=%s", user.id)
        raise IncorrectPasswordError()

    token = create_access_token(build_session_claims(user), settings)

    logger.info("LOGIN SUCCESS | user_id=%s | email=%s", user.id, user.email)
    return token, user


def create_user(
    db: Session,
    email: str,
    password_hash: str,
    role: str = "admin",
    dojo_name: Optional[str] = None,
    logo_url: Optional[str] = None,
) -> User:
    user = User(
        email=email,
        password_hash=password_hash,
        role=role,
        dojo_name=dojo_name,
        logo_url=logo_url,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
