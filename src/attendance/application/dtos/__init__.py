from attendance.application.dtos.teacher_dto import (
    LoginResult,
    TeacherDTO,
    TeacherProfileDTO,
)

__all__ = ["LoginResult", "TeacherDTO", "TeacherProfileDTO"]
