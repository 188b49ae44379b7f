from pydantic import BaseModel, Field
from typing import Any, Dict


class DojoConfigOut(BaseModel):
    nomes_modalidades: Dict[str, Any] = Field(default_factory=dict)
    mapa_professores: Dict[str, Any] = Field(default_factory=dict)
