from attendance.application.services.identity_service import TeacherIdentityService

__all__ = ["TeacherIdentityService"]
