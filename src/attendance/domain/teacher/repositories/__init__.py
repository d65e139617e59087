from attendance.domain.teacher.repositories.teacher_repository import (
    TeacherRepository,
)

__all__ = ["TeacherRepository"]
