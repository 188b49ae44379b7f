from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dojo_api.core.session import SessionContext
from dojo_api.db.session import get_db
from dojo_api.dependencies.auth import get_current_session
from dojo_api.schemas.config import DojoConfigOut
from dojo_api.services.config_service import get_dojo_config, get_financial_config

router = APIRouter(tags=["Config"])


@router.get("/dojo-config", response_model=DojoConfigOut)
def dojo_config(
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return get_dojo_config(db, session.user_id)


@router.get("/financial-config", response_model=Dict[str, Any])
def financial_config(
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return get_financial_config(db, session.user_id)
