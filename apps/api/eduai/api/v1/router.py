from __future__ import annotations

from fastapi import APIRouter

from eduai.api.v1.endpoints import chat, classroom, lessons, mentor

api_router = APIRouter()
api_router.include_router(lessons.router)
api_router.include_router(chat.router)
api_router.include_router(mentor.router)
api_router.include_router(classroom.router)
