from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dojo_api.core.errors import TransientFailureError
from dojo_api.core.logger import logger
from dojo_api.models import DojoConfig, FinancialConfig


def default_dojo_config() -> dict:
    return {"nomes_modalidades": {}, "mapa_professores": {}}


def get_dojo_config(db: Session, user_id: int) -> dict:
    try:
        config = db.query(DojoConfig).filter(DojoConfig.user_id == user_id).first()
    except SQLAlchemyError as e:
        logger.exception("DOJO CONFIG FETCH FAILED | user_id=%s", user_id)
        raise TransientFailureError() from e

    if not config:
        return default_dojo_config()

    return {
        "nomes_modalidades": config.nomes_modalidades or {},
        "mapa_professores": config.mapa_professores or {},
    }


def get_financial_config(db: Session, user_id: int) -> dict:
    try:
        config = (
            db.query(FinancialConfig)
            .filter(FinancialConfig.user_id == user_id)
            .first()
        )
    except SQLAlchemyError as e:
        logger.exception("FINANCIAL CONFIG FETCH FAILED | user_id=%s", user_id)
        raise TransientFailureError() from e

    return dict(config.config or {}) if config else {}
