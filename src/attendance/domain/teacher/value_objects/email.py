"""Email value object.

Provides validated, normalized email addresses for teacher identification.
Normalization (strip + lower case) makes email uniqueness case-insensitive.
"""

import re
from dataclasses import dataclass

from attendance.domain.teacher.exceptions import InvalidEmailError

# Simple but effective email regex
# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidEmailError(self.value or "")

        normalized = self.value.lower().strip()

        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(self.value)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
