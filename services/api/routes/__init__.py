from .resume import router as resume_router
from .cover_letter import router as cover_letter_router
from .candidates import router as candidates_router
from .applications import router as applications_router
from .export import router as export_router
from .health import router as health_router

__all__ = [
    "resume_router",
    "cover_letter_router",
    "candidates_router",
    "applications_router",
    "export_router",
    "health_router",
]
