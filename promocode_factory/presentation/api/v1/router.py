from fastapi import APIRouter

from .partners import partners_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(partners_router, tags=["Partners"])
