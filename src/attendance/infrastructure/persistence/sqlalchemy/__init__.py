"""SQLAlchemy persistence for the attendance backend.

Provides:
- Base: Declarative base for all models
- TeacherModel: the teachers table
- TeacherRepositorySQLAlchemy: the credential store adapter
"""

from attendance.infrastructure.persistence.sqlalchemy.models import Base, TeacherModel
from attendance.infrastructure.persistence.sqlalchemy.repositories import (
    TeacherRepositorySQLAlchemy,
)

__all__ = ["Base", "TeacherModel", "TeacherRepositorySQLAlchemy"]
