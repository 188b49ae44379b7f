from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    email: str
    password: str


class UserSummary(BaseModel):
    id: int
    email: str
    role: str
    dojo_name: Optional[str] = None
    logo: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    user: UserSummary
