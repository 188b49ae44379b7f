from dojo_api.core.logger import logger
from dojo_api.db.base import Base
from dojo_api.db.session import get_engine
from dojo_api import models  # noqa: F401  registers tables on Base.metadata


def init_db(engine=None):
    engine = engine or get_engine()

    logger.info("DB INIT STARTED")
    Base.metadata.create_all(bind=engine)
    logger.info("DB TABLES READY | tables=%s", ",".join(sorted(Base.metadata.tables)))
