from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from dojo_api.core.config import settings

SessionLocal = sessionmaker(autocommit=False, autoflush=False)


@lru_cache
def get_engine() -> Engine:
    connect_args = {}
    if settings.DB_SSLMODE:
        connect_args["sslmode"] = settings.DB_SSLMODE

    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        # pool exhaustion raises sqlalchemy.exc.TimeoutError instead of hanging
        pool_timeout=settings.DB_POOL_TIMEOUT,
        connect_args=connect_args,
    )
    SessionLocal.configure(bind=engine)
    return engine


def get_db() -> Generator[Session, None, None]:
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
