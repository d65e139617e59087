"""Identity service for teacher registration, login and profile lookup."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from attendance.application.dtos import LoginResult, TeacherDTO, TeacherProfileDTO
from attendance.domain.shared.exceptions import ValidationError
from attendance.domain.teacher import (
    CorruptCredentialError,
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    Email,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidSessionTokenError,
    SessionTokenExpiredError,
    Teacher,
    TeacherNotFoundError,
)
from attendance_auth import (
    InvalidTokenError,
    PasswordHashingService,
    SessionTokenService,
    TokenExpiredError,
    TokenPayload,
    WeakPasswordError,
)
from attendance_auth import exceptions as auth_errors

if TYPE_CHECKING:
    from attendance.domain.teacher import TeacherRepository

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _placeholder_hash(rounds: int) -> str:
    # Verified against when the email is unknown, so that path costs
    # about as much as a wrong password.
    return PasswordHashingService(rounds=rounds).hash("placeholder-password")


class TeacherIdentityService:
    """
    Application service for teacher identity.

    Orchestrates attendance_auth infrastructure (password hashing, session
    tokens) with the Teacher domain to provide:
    - Registration with email and employee id uniqueness
    - Login with password, issuing a session token
    - Profile lookup, by bare id or by verified token

    Every call is independent. bcrypt work runs in a worker thread so a
    slow hash never blocks the event loop serving other requests.
    """

    def __init__(
        self,
        teacher_repository: TeacherRepository,
        password_service: PasswordHashingService,
        token_service: SessionTokenService,
    ):
        self._teacher_repo = teacher_repository
        self._password_service = password_service
        self._token_service = token_service

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        employee_id: str,
        department: str,
    ) -> TeacherDTO:
        fields = {
            "name": name,
            "email": email,
            "password": password,
            "employee_id": employee_id,
            "department": department,
        }
        missing = [key for key, value in fields.items() if not value or not value.strip()]
        if missing:
            msg = "All fields are required"
            raise ValidationError(msg, details={"missing": missing})

        email_obj = Email(email)
        employee_id = employee_id.strip()

        try:
            self._password_service.validate_strength(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, details={"field": "password"}) from e

        if await self._teacher_repo.find_by_email(email_obj) is not None:
            raise DuplicateEmailError(email_obj.value)

        if await self._teacher_repo.find_by_employee_id(employee_id) is not None:
            raise DuplicateEmployeeIdError(employee_id)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        teacher = Teacher.create(
            name=name,
            email=email_obj,
            password_hash=password_hash,
            employee_id=employee_id,
            department=department,
        )
        # A concurrent registration can slip past the checks above; the
        # store's unique constraints make add() raise the same errors.
        saved = await self._teacher_repo.add(teacher)

        logger.info("Teacher registered: id=%s", saved.id)
        return TeacherDTO.from_teacher(saved)

    async def login(self, email: str, password: str) -> LoginResult:
        if not email or not email.strip() or not password:
            msg = "Email and password are required"
            raise ValidationError(msg)

        try:
            email_obj = Email(email)
        except InvalidEmailError:
            email_obj = None

        teacher = None
        if email_obj is not None:
            teacher = await self._teacher_repo.find_by_email(email_obj)

        if teacher is None:
            await asyncio.to_thread(self._verify_placeholder, password)
            raise InvalidCredentialsError("unknown email")

        try:
            valid = await asyncio.to_thread(
                self._password_service.verify,
                password,
                teacher.password_hash,
            )
        except auth_errors.CorruptCredentialError as e:
            logger.error("Stored password hash is malformed for teacher %s", teacher.id)
            raise CorruptCredentialError(teacher.id) from e

        if not valid:
            raise InvalidCredentialsError("wrong password")

        if self._password_service.needs_rehash(teacher.password_hash):
            logger.warning(
                "Password hash for teacher %s uses an outdated work factor",
                teacher.id,
            )

        dto = TeacherDTO.from_teacher(teacher)
        token = self._token_service.issue(teacher_id=dto.id, email=dto.email)

        logger.info("Teacher logged in: id=%s", dto.id)
        return LoginResult(
            teacher=dto,
            token=token,
            expires_in=self._token_service.expires_in_seconds,
        )

    async def get_profile(self, teacher_id: int) -> TeacherProfileDTO:
        """Look up a profile by bare id.

        This is the legacy contract: the caller is not asked to prove who
        it is. Prefer ``get_profile_for_token``.
        """
        teacher = await self._teacher_repo.find_by_id(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(teacher_id)
        return TeacherDTO.from_teacher(teacher)

    async def get_profile_for_token(self, token: str) -> TeacherProfileDTO:
        payload = self.verify_token(token)
        return await self.get_profile(payload.teacher_id)

    def _verify_placeholder(self, password: str) -> None:
        placeholder = _placeholder_hash(self._password_service.rounds)
        self._password_service.verify(password, placeholder)

    def verify_token(self, token: str) -> TokenPayload:
        try:
            return self._token_service.verify(token)
        except TokenExpiredError as e:
            raise SessionTokenExpiredError from e
        except InvalidTokenError as e:
            raise InvalidSessionTokenError(e.message) from e
