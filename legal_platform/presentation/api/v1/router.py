"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from legal_platform.presentation.api.v1.endpoints.health import router as health_router
from legal_platform.presentation.api.v1.endpoints.auth import router as auth_router
from legal_platform.presentation.api.v1.endpoints.appointments import router as appointments_router
from legal_platform.presentation.api.v1.endpoints.cases import router as cases_router
from legal_platform.presentation.api.v1.endpoints.tasks import router as tasks_router
from legal_platform.presentation.api.v1.endpoints.messages import router as messages_router
from legal_platform.presentation.api.v1.endpoints.notifications import router as notifications_router
from legal_platform.presentation.api.v1.endpoints.documents import router as documents_router
from legal_platform.presentation.api.v1.endpoints.demo import router as demo_router
from legal_platform.presentation.api.v1.endpoints.lawyers import router as lawyers_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(appointments_router)
router.include_router(cases_router)
router.include_router(tasks_router)
router.include_router(messages_router)
router.include_router(notifications_router)
router.include_router(documents_router)
router.include_router(demo_router)
router.include_router(lawyers_router)
