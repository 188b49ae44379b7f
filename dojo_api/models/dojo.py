from sqlalchemy import (
    JSON, Column, Date, DateTime, ForeignKey, Integer, String
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from dojo_api.db.base import Base

# JSONB on postgres, plain JSON elsewhere (sqlite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


# =====================================================
# USERS (dojo owners, one tenant each)
# =====================================================

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="admin")
    dojo_name = Column(String)
    logo_url = Column(String)

    students = relationship("Student", back_populates="owner")


# =====================================================
# STUDENTS
# =====================================================

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True
    )

    nome = Column(String(150), nullable=False)
    whatsapp = Column(String(30))
    email = Column(String(150))
    modalidade = Column(String(100))
    professor = Column(String(100))
    vencimento = Column(Date)
    status = Column(String(30))
    # month -> payment status, shape owned by the client
    pagamentos = Column(JSONType, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="students")


# =====================================================
# CONFIG (at most one row per user)
# =====================================================

class DojoConfig(Base):
    __tablename__ = "dojo_config"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    nomes_modalidades = Column(JSONType, nullable=False, default=dict)
    mapa_professores = Column(JSONType, nullable=False, default=dict)


class FinancialConfig(Base):
    __tablename__ = "financial_config"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    config = Column(JSONType, nullable=False, default=dict)
