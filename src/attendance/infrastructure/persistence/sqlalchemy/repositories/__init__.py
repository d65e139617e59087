from attendance.infrastructure.persistence.sqlalchemy.repositories.teacher_repository import (  # NOQA: E501
    TeacherRepositorySQLAlchemy,
)

__all__ = ["TeacherRepositorySQLAlchemy"]
