from contextlib import contextmanager
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dojo_api.core.errors import StudentNotFoundError, TransientFailureError
from dojo_api.core.logger import logger
from dojo_api.models import Student
from dojo_api.schemas.student import StudentSchema


# Every query in this module filters on user_id. A student owned by another
# user is reported exactly like a missing one.


@contextmanager
def _store_errors(db: Session, action: str, user_id: int):
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("STUDENT %s FAILED | user_id=%s", action, user_id)
        raise TransientFailureError() from e


def _get_owned_student(db: Session, user_id: int, student_id: int) -> Student:
    student = (
        db.query(Student)
        .filter(
            Student.id == student_id,
            Student.user_id == user_id
        )
        .first()
    )
    if not student:
        raise StudentNotFoundError()
    return student


def list_students(db: Session, user_id: int) -> List[Student]:
    with _store_errors(db, "LIST", user_id):
        return (
            db.query(Student)
            .filter(Student.user_id == user_id)
            .order_by(Student.nome.asc())
            .all()
        )


def create_student(db: Session, user_id: int, data: StudentSchema) -> Student:
    with _store_errors(db, "CREATE", user_id):
        student = Student(**data.model_dump(), user_id=user_id)
        db.add(student)
        db.commit()
        db.refresh(student)

    logger.info("STUDENT CREATED | user_id=%s | student_id=%s", user_id, student.id)
    return student


def update_student(
    db: Session, user_id: int, student_id: int, data: StudentSchema
) -> Student:
    with _store_errors(db, "UPDATE", user_id):
        student = _get_owned_student(db, user_id, student_id)
        for field, value in data.model_dump().items():
            setattr(student, field, value)
        db.commit()
        db.refresh(student)

    return student


def update_payments(db: Session, user_id: int, student_id: int, pagamentos: dict) -> Student:
    with _store_errors(db, "PAYMENTS UPDATE", user_id):
        student = _get_owned_student(db, user_id, student_id)
        # new dict so the JSON column is flagged dirty
        student.pagamentos = dict(pagamentos)
        db.commit()
        db.refresh(student)

    return student
