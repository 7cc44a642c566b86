"""API v1 routers"""

from fastapi import APIRouter

from .images import router as images_router
from .masters import router as masters_router
from .presentations import router as presentations_router
from .templates import router as templates_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(presentations_router)
v1_router.include_router(masters_router)
v1_router.include_router(templates_router)
v1_router.include_router(images_router)
