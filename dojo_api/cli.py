"""
Out-of-band user management. There is no signup route, dojo owners are
created from here.

    dojo-create-user owner@dojo.com --dojo-name "Dojo Central" --role admin
"""
import argparse
import getpass
import sys

from sqlalchemy.exc import IntegrityError

from dojo_api.core.config import settings
from dojo_api.core.logger import configure_logging, logger
from dojo_api.core.security import hash_password
from dojo_api.db.init_db import init_db
from dojo_api.db.session import SessionLocal, get_engine
from dojo_api.services.auth_service import create_user


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a dojo owner account")
    parser.add_argument("email")
    parser.add_argument("--password", help="prompted when omitted")
    parser.add_argument("--role", default="admin")
    parser.add_argument("--dojo-name", dest="dojo_name")
    parser.add_argument("--logo-url", dest="logo_url")
    return parser


def main(argv=None, session_factory=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL)

    password = args.password or getpass.getpass("Password: ")
    if not password:
        print("Password cannot be empty", file=sys.stderr)
        return 1

    if session_factory is None:
        init_db(get_engine())
        session_factory = SessionLocal

    db = session_factory()
    try:
        user = create_user(
            db,
            email=args.email,
            password_hash=hash_password(password),
            role=args.role,
            dojo_name=args.dojo_name,
            logo_url=args.logo_url,
        )
    except IntegrityError:
        db.rollback()
        print(f"User already exists: {args.email}", file=sys.stderr)
        return 1
    finally:
        db.close()

    logger.info("USER CREATED | user_id=%s | email=%s", user.id, user.email)
    return 0


if __name__ == "__main__":
    sys.exit(main())
