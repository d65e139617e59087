from attendance.domain.teacher.aggregates.teacher import Teacher

__all__ = ["Teacher"]
