"""Teacher schemas for request/response models.

JSON keys are camelCase to match the mobile client
(``employeeId``, ``createdAt``); Python attributes stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from attendance.application.dtos import LoginResult, TeacherDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TeacherRegisterRequest(CamelModel):
    """Request schema for teacher registration.

    Emptiness is checked by the identity service so that every missing
    field yields the same 400 response.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address (case-insensitive)")
    password: str = Field(..., description="Password (at least 8 characters)")
    employee_id: str = Field(..., description="Unique employee identifier")
    department: str = Field(..., description="Department or class")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "A. Smith",
                "email": "a@x.com",
                "password": "pw123456",
                "employeeId": "E1",
                "department": "Class 5",
            },
        },
    )


class TeacherLoginRequest(CamelModel):
    """Request schema for teacher login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@x.com",
                "password": "pw123456",
            },
        },
    )


class TeacherResponse(CamelModel):
    """A teacher record without its credential.

    Also used as the profile projection.
    """

    id: int
    name: str
    email: str
    employee_id: str
    department: str
    created_at: datetime

    @classmethod
    def from_dto(cls, dto: TeacherDTO) -> "TeacherResponse":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            employee_id=dto.employee_id,
            department=dto.department,
            created_at=dto.created_at,
        )


class TeacherLoginResponse(TeacherResponse):
    """The stripped teacher record plus a session token."""

    token: str
    expires_in: int = Field(..., description="Token lifetime in seconds")

    @classmethod
    def from_result(cls, result: LoginResult) -> "TeacherLoginResponse":
        teacher = result.teacher
        return cls(
            id=teacher.id,
            name=teacher.name,
            email=teacher.email,
            employee_id=teacher.employee_id,
            department=teacher.department,
            created_at=teacher.created_at,
            token=result.token,
            expires_in=result.expires_in,
        )


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints."""

    message: str
    code: str
