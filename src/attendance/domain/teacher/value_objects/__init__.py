from attendance.domain.teacher.value_objects.email import Email

__all__ = ["Email"]
