from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional
from typing_extensions import Annotated


class StudentSchema(BaseModel):
    # unknown keys (user_id included) are dropped, ownership comes from the session
    model_config = ConfigDict(extra="ignore")

    nome: Annotated[str, Field(min_length=1, max_length=150)]
    whatsapp: Optional[Annotated[str, Field(max_length=30)]] = None
    email: Optional[Annotated[str, Field(max_length=150)]] = None
    modalidade: Optional[Annotated[str, Field(max_length=100)]] = None
    professor: Optional[Annotated[str, Field(max_length=100)]] = None
    vencimento: Optional[date] = None
    status: Optional[Annotated[str, Field(max_length=30)]] = None
    pagamentos: Dict[str, Any] = Field(default_factory=dict)


class PaymentsPatchSchema(BaseModel):
    pagamentos: Dict[str, Any]


class StudentOut(StudentSchema):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: Optional[datetime] = None
