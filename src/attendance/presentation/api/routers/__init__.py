from attendance.presentation.api.routers.teachers import router as teachers_router

__all__ = ["teachers_router"]
