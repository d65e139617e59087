from attendance.infrastructure.persistence.sqlalchemy.models.base import Base
from attendance.infrastructure.persistence.sqlalchemy.models.teacher_model import (
    EMAIL_CONSTRAINT,
    EMPLOYEE_ID_CONSTRAINT,
    TeacherModel,
)

__all__ = [
    "EMAIL_CONSTRAINT",
    "EMPLOYEE_ID_CONSTRAINT",
    "Base",
    "TeacherModel",
]
