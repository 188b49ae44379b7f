from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dojo_api.core.session import SessionContext
from dojo_api.db.session import get_db
from dojo_api.dependencies.auth import get_current_session
from dojo_api.schemas.student import PaymentsPatchSchema, StudentOut, StudentSchema
from dojo_api.services import student_service

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentOut])
def list_students(
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return student_service.list_students(db, session.user_id)


@router.post("", response_model=StudentOut)
def create_student(
    body: StudentSchema,
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return student_service.create_student(db, session.user_id, body)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(
    student_id: int,
    body: StudentSchema,
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return student_service.update_student(db, session.user_id, student_id, body)


@router.patch("/{student_id}/payments", response_model=StudentOut)
def update_payments(
    student_id: int,
    body: PaymentsPatchSchema,
    session: SessionContext = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    return student_service.update_payments(
        db, session.user_id, student_id, body.pagamentos
    )
