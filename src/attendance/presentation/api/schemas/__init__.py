from attendance.presentation.api.schemas.teachers import (
    ErrorResponse,
    TeacherLoginRequest,
    TeacherLoginResponse,
    TeacherRegisterRequest,
    TeacherResponse,
)

__all__ = [
    "ErrorResponse",
    "TeacherLoginRequest",
    "TeacherLoginResponse",
    "TeacherRegisterRequest",
    "TeacherResponse",
]
