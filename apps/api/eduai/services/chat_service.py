from __future__ import annotations

import logging
import uuid

from eduai.core.errors import ChatBusyError, ModelError, NotFoundError
from eduai.schemas.chat import ChatMessage
from eduai.services.model_client import ModelClient, model_client
from eduai.services.stages import chat_turn

logger = logging.getLogger(__name__)

GREETING = (
    "Hi! I'm your AI tutor. I've analyzed this lesson. Is there anything specific you found confusing, "
    "or shall I ask you a question to test your knowledge?"
)
FALLBACK_REPLY = "I'm having trouble connecting right now. Please try again."

IDLE = "idle"
AWAITING_RESPONSE = "awaiting_response"


class ChatSession:
    """Append-only tutor conversation bound to one lesson's cleaned transcript."""

    def __init__(self, lesson_id: str, context: str, client: ModelClient | None = None, greeting: bool = True) -> None:
        self.id = str(uuid.uuid4())
        self.lesson_id = lesson_id
        self.context = context
        self.client = client or model_client
        self.state = IDLE
        self._messages: list[ChatMessage] = []
        if greeting:
            self._messages.append(ChatMessage(role="assistant", text=GREETING))

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    async def send(self, text: str) -> ChatMessage:
        if self.state == AWAITING_RESPONSE:
            raise ChatBusyError("A reply is still being generated for this session.")

        history = list(self._messages)
        self._messages.append(ChatMessage(role="user", text=text))
        self.state = AWAITING_RESPONSE
        try:
            reply_text = await chat_turn(self.client, self.context, history, text)
        except ModelError as exc:
            logger.warning("Chat session %s falling back: %s", self.id, exc)
            reply_text = FALLBACK_REPLY
        except BaseException:
            # Every user turn is followed by exactly one assistant reply.
            self._messages.append(ChatMessage(role="assistant", text=FALLBACK_REPLY))
            raise
        finally:
            self.state = IDLE

        reply = ChatMessage(role="assistant", text=reply_text)
        self._messages.append(reply)
        return reply


class ChatService:
    def __init__(self, client: ModelClient | None = None) -> None:
        self.client = client or model_client
        self.sessions: dict[str, ChatSession] = {}

    def create(self, lesson_id: str, context: str) -> ChatSession:
        session = ChatSession(lesson_id, context, client=self.client)
        self.sessions[session.id] = session
        return session

    def get(self, session_id: str) -> ChatSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise NotFoundError("Chat session not found")
        return session

    def discard(self, session_id: str) -> None:
        if self.sessions.pop(session_id, None) is None:
            raise NotFoundError("Chat session not found")

    async def send(self, session_id: str, text: str) -> ChatMessage:
        return await self.get(session_id).send(text)


chat_service = ChatService()
