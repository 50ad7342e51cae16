from fastapi import APIRouter

from .category import router as category
from .post import router as post

api_router = APIRouter(prefix="/v1")

api_router.include_router(category)
api_router.include_router(post)
