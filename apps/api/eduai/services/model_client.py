from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from eduai.core.config import settings
from eduai.core.errors import ModelError, ModelErrorKind
from eduai.schemas.chat import ChatMessage

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class Attachment:
    data: bytes
    mime_type: str
    filename: str = "upload"


class ModelClient:
    """Request/response wrapper around the remote language model.

    Plain prompts return text. With ``schema`` the reply must parse into that
    pydantic model or the call fails. With ``attachment`` the media is sent to
    the transcription endpoint and the spoken text comes back.
    """

    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None) -> None:
        if client is None and settings.openai_api_key:
            client = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.openai_timeout_seconds)
        self.client = client
        self.model = model or settings.openai_model

    async def generate(
        self,
        prompt: str,
        *,
        schema: type[SchemaT] | None = None,
        attachment: Attachment | None = None,
        system: str | None = None,
        history: Sequence[ChatMessage] = (),
    ) -> str | SchemaT:
        if self.client is None:
            raise ModelError(ModelErrorKind.TRANSPORT, "OpenAI API key is not configured")

        if attachment is not None:
            text = await self._transcribe(prompt, attachment)
        else:
            text = await self._respond(prompt, schema, system, history)

        if not text or not text.strip():
            raise ModelError(ModelErrorKind.EMPTY_RESPONSE, "model returned no content")

        if schema is None:
            return text.strip()
        try:
            return schema.model_validate_json(text)
        except PydanticValidationError as exc:
            logger.warning("Response did not match %s: %s", schema.__name__, exc.errors()[:3])
            raise ModelError(ModelErrorKind.SCHEMA_MISMATCH, f"response did not match {schema.__name__}") from exc

    async def _respond(
        self,
        prompt: str,
        schema: type[BaseModel] | None,
        system: str | None,
        history: Sequence[ChatMessage],
    ) -> str:
        kwargs: dict = {"model": self.model, "input": self._build_input(prompt, system, history)}
        if schema is not None:
            kwargs["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": schema.__name__,
                    "schema": schema.model_json_schema(),
                    "strict": False,
                }
            }
        logger.debug("Model request model=%s schema=%s turns=%d", self.model, schema and schema.__name__, len(history))
        try:
            response = await self.client.responses.create(**kwargs)
        except OpenAIError as exc:
            logger.warning("Model request failed: %s", exc)
            raise ModelError(ModelErrorKind.TRANSPORT, str(exc)) from exc
        return response.output_text

    async def _transcribe(self, prompt: str, attachment: Attachment) -> str:
        kwargs: dict = {
            "model": settings.openai_transcription_model,
            "file": (attachment.filename, attachment.data, attachment.mime_type),
        }
        if prompt:
            kwargs["prompt"] = prompt
        logger.debug("Transcription request file=%s bytes=%d", attachment.filename, len(attachment.data))
        try:
            response = await self.client.audio.transcriptions.create(**kwargs)
        except OpenAIError as exc:
            logger.warning("Transcription request failed: %s", exc)
            raise ModelError(ModelErrorKind.TRANSPORT, str(exc)) from exc
        return response.text

    @staticmethod
    def _build_input(prompt: str, system: str | None, history: Sequence[ChatMessage]) -> str | list[dict]:
        if system is None and not history:
            return prompt
        messages: list[dict] = []
        if system:
            messages.append({"role": "system", "content": system})
        for message in history:
            messages.append({"role": message.role, "content": message.text})
        messages.append({"role": "user", "content": prompt})
        return messages


model_client = ModelClient()
