"""SQLAlchemy model for the Teacher aggregate."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from attendance.domain.shared.time import utc_now
from attendance.infrastructure.persistence.sqlalchemy.models.base import Base

EMAIL_CONSTRAINT = "uq_teachers_email"
EMPLOYEE_ID_CONSTRAINT = "uq_teachers_employee_id"


class TeacherModel(Base):
    """SQLAlchemy model for persisting Teacher aggregates.

    Table: teachers

    The two unique constraints are what makes registration safe under
    concurrency; the repository maps their violations back to domain errors.
    Emails are stored already normalized (lower case), so the plain unique
    constraint is case-insensitive in effect.
    """

    __tablename__ = "teachers"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_CONSTRAINT),
        UniqueConstraint("employee_id", name=EMPLOYEE_ID_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<TeacherModel(id={self.id}, email={self.email})>"
