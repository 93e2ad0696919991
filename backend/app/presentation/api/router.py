"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.endpoints.student_ids import router as student_ids_router
from app.presentation.api.endpoints.student_status import router as student_status_router
from app.presentation.api.endpoints.certificates import router as certificates_router
from app.presentation.api.endpoints.internship_domains import router as internship_domains_router
from app.presentation.api.endpoints.tasks import router as tasks_router

router = APIRouter()
router.include_router(student_ids_router)
router.include_router(student_status_router)
router.include_router(certificates_router)
router.include_router(internship_domains_router)
router.include_router(tasks_router)
