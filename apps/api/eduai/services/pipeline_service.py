from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable
from typing import TypeVar

from eduai.core.errors import ModelError, PipelineError, ValidationError
from eduai.schemas.lesson import Lesson
from eduai.services.model_client import ModelClient, model_client
from eduai.services.stages import (
    clean_transcript,
    generate_exam_questions,
    generate_quiz,
    summarize_with_examples,
    transcribe_media,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def merge_transcript(notes: str, transcribed: str) -> str:
    """Append transcribed media text to typed notes, separated by a blank line."""
    notes = notes.strip()
    transcribed = transcribed.strip()
    if notes and transcribed:
        return f"{notes}\n\n{transcribed}"
    return notes or transcribed


class LessonPipeline:
    """Turns a raw lecture transcript into a complete, immutable Lesson.

    Clean runs first; summary, exam questions and quiz then run concurrently
    against the cleaned text. Any stage failure discards the whole attempt.
    """

    def __init__(self, client: ModelClient | None = None) -> None:
        self.client = client or model_client

    async def transcribe(self, data: bytes, mime_type: str, filename: str = "upload", topic: str | None = None) -> str:
        return await transcribe_media(self.client, data, mime_type, filename=filename, topic=topic)

    async def run(self, topic: str, raw_transcript: str) -> Lesson:
        if not topic or not topic.strip():
            raise ValidationError("Lesson topic is required.")
        if not raw_transcript or not raw_transcript.strip():
            raise ValidationError("Lesson transcript is required.")

        started = time.perf_counter()
        logger.info("Generating lesson %r (%d transcript chars)", topic, len(raw_transcript))

        cleaned = await self._stage("clean", clean_transcript(self.client, raw_transcript))

        summary, exam_questions, quiz = await asyncio.gather(
            self._stage("summary", summarize_with_examples(self.client, cleaned)),
            self._stage("exam_questions", generate_exam_questions(self.client, cleaned)),
            self._stage("quiz", generate_quiz(self.client, cleaned)),
        )

        lesson = Lesson(
            topic=topic.strip(),
            raw_transcript=raw_transcript,
            cleaned_transcript=cleaned,
            summary=summary.summary,
            real_life_examples=summary.examples,
            exam_questions=exam_questions,
            quiz=quiz,
            is_processing=False,
        )
        logger.info("Lesson %s generated in %.2fs", lesson.id, time.perf_counter() - started)
        return lesson

    async def _stage(self, name: str, step: Awaitable[T]) -> T:
        started = time.perf_counter()
        try:
            result = await step
        except ModelError as exc:
            logger.warning("Stage %s failed after %.2fs: %s", name, time.perf_counter() - started, exc)
            raise PipelineError(name, exc) from exc
        logger.info("Stage %s done in %.2fs", name, time.perf_counter() - started)
        return result


lesson_pipeline = LessonPipeline()
