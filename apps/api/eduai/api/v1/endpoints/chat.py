from __future__ import annotations

from fastapi import APIRouter, Depends

from eduai.api.v1.deps import get_chat_service, get_classroom
from eduai.core.errors import ValidationError
from eduai.schemas.chat import ChatMessageRequest, CreateChatSessionRequest
from eduai.services.chat_service import ChatService, ChatSession
from eduai.services.classroom_service import ClassroomState

router = APIRouter(prefix="/chat", tags=["chat"])


def _serialize_session(session: ChatSession) -> dict:
    return {
        "id": session.id,
        "lesson_id": session.lesson_id,
        "state": session.state,
        "messages": [message.model_dump(mode="json") for message in session.messages],
    }


@router.post("/sessions", status_code=201)
def create_session(
    payload: CreateChatSessionRequest,
    classroom: ClassroomState = Depends(get_classroom),
    chat: ChatService = Depends(get_chat_service),
):
    lesson = classroom.get_lesson(payload.lesson_id)
    session = chat.create(lesson.id, lesson.cleaned_transcript or lesson.raw_transcript)
    return _serialize_session(session)


@router.get("/sessions/{session_id}")
def get_session(session_id: str, chat: ChatService = Depends(get_chat_service)):
    return _serialize_session(chat.get(session_id))


@router.delete("/sessions/{session_id}")
def discard_session(session_id: str, chat: ChatService = Depends(get_chat_service)):
    chat.discard(session_id)
    return {"ok": True}


@router.post("/sessions/{session_id}/messages")
async def send_message(session_id: str, payload: ChatMessageRequest, chat: ChatService = Depends(get_chat_service)):
    if not payload.text.strip():
        raise ValidationError("Message text is required.")
    reply = await chat.send(session_id, payload.text.strip())
    return reply.model_dump(mode="json")
