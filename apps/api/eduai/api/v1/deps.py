from __future__ import annotations

from fastapi import Request

from eduai.services.chat_service import ChatService, chat_service
from eduai.services.classroom_service import ClassroomState
from eduai.services.mentor_service import MentorService, mentor_service
from eduai.services.pipeline_service import LessonPipeline, lesson_pipeline


def get_classroom(request: Request) -> ClassroomState:
    return request.app.state.classroom


def get_pipeline() -> LessonPipeline:
    return lesson_pipeline


def get_chat_service() -> ChatService:
    return chat_service


def get_mentor_service() -> MentorService:
    return mentor_service
