"""Teacher router for registration, login and profile lookup."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from attendance.domain.shared.exceptions import AuthorizationError
from attendance.domain.teacher import InvalidSessionTokenError
from attendance.presentation.api.dependencies import (
    CurrentClaims,
    DBSession,
    IdentityService,
    OptionalBearerToken,
    SettingsDep,
)
from attendance.presentation.api.schemas.teachers import (
    ErrorResponse,
    TeacherLoginRequest,
    TeacherLoginResponse,
    TeacherRegisterRequest,
    TeacherResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Largest id a signed 64-bit store column can hold
MAX_TEACHER_ID = 2**63 - 1


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new teacher",
    responses={
        201: {"description": "Teacher registered successfully"},
        400: {
            "model": ErrorResponse,
            "description": "Missing fields, weak password, or duplicate "
            "email / employee id",
        },
    },
)
async def register(
    request: TeacherRegisterRequest,
    identity_service: IdentityService,
    session: DBSession,
) -> TeacherResponse:
    """
    Create a teacher account.

    Email addresses are compared case-insensitively; employee ids are
    trimmed and compared exactly. The response never contains the
    password hash.
    """
    teacher = await identity_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        employee_id=request.employee_id,
        department=request.department,
    )
    await session.commit()
    return TeacherResponse.from_dto(teacher)


@router.post(
    "/login",
    summary="Authenticate a teacher",
    responses={
        200: {"description": "Login successful"},
        401: {
            "model": ErrorResponse,
            "description": "Invalid email or password",
        },
    },
)
async def login(
    request: TeacherLoginRequest,
    identity_service: IdentityService,
) -> TeacherLoginResponse:
    """
    Authenticate with email and password.

    An unknown email and a wrong password produce the same response.
    """
    result = await identity_service.login(
        email=request.email,
        password=request.password,
    )
    return TeacherLoginResponse.from_result(result)


@router.get(
    "/profile",
    summary="Get a teacher profile by id",
    responses={
        200: {"description": "Teacher profile"},
        400: {
            "model": ErrorResponse,
            "description": "Missing, non-numeric or out-of-range id",
        },
        401: {"model": ErrorResponse, "description": "Token required"},
        403: {"model": ErrorResponse, "description": "Token is for another teacher"},
        404: {"model": ErrorResponse, "description": "Teacher not found"},
    },
)
async def get_profile(
    teacher_id: Annotated[
        int,
        Query(alias="teacherId", ge=1, le=MAX_TEACHER_ID),
    ],
    identity_service: IdentityService,
    settings: SettingsDep,
    token: OptionalBearerToken,
) -> TeacherResponse:
    """
    Look up a teacher by id.

    Unless ``PROFILE_REQUIRES_TOKEN`` is enabled, any caller may read any
    profile. With it enabled, the caller's session token must belong to
    the requested teacher.
    """
    if settings.profile_requires_token:
        if token is None:
            msg = "missing bearer token"
            raise InvalidSessionTokenError(msg)
        claims = identity_service.verify_token(token)
        if claims.teacher_id != teacher_id:
            raise AuthorizationError(
                details={"token_teacher_id": claims.teacher_id, "requested": teacher_id},
            )

    teacher = await identity_service.get_profile(teacher_id)
    return TeacherResponse.from_dto(teacher)


@router.get(
    "/me",
    summary="Get the authenticated teacher's profile",
    responses={
        200: {"description": "Teacher profile"},
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
        404: {"model": ErrorResponse, "description": "Teacher no longer exists"},
    },
)
async def get_my_profile(
    claims: CurrentClaims,
    identity_service: IdentityService,
) -> TeacherResponse:
    """Return the profile of the teacher the session token was issued to."""
    teacher = await identity_service.get_profile(claims.teacher_id)
    return TeacherResponse.from_dto(teacher)
