from __future__ import annotations

import asyncio
import re

import pytest

from conftest import NEWTON_TRANSCRIPT, ScriptedModelClient, transport_error
from eduai.core.errors import ModelError, ModelErrorKind, PipelineError, TranscriptionError, ValidationError
from eduai.schemas.lesson import MARKS_TO_TYPE, Lesson
from eduai.services.pipeline_service import LessonPipeline, merge_transcript


def run(coro):
    return asyncio.run(coro)


def test_successful_run_builds_complete_lesson(model):
    lesson = run(LessonPipeline(model).run("Newton's Third Law", NEWTON_TRANSCRIPT))

    assert isinstance(lesson, Lesson)
    assert lesson.topic == "Newton's Third Law"
    assert lesson.raw_transcript == NEWTON_TRANSCRIPT
    assert lesson.cleaned_transcript
    assert lesson.summary
    assert len(lesson.real_life_examples) == 3
    assert len(lesson.quiz) == 5
    for question in lesson.quiz:
        assert len(question.options) == 4
        assert 0 <= question.correct_answer < 4
    assert lesson.exam_questions
    assert all(q.marks in MARKS_TO_TYPE for q in lesson.exam_questions)
    assert lesson.is_processing is False


def test_newtons_third_law_scenario(model):
    lesson = run(LessonPipeline(model).run("Newton's Third Law", NEWTON_TRANSCRIPT))

    assert re.search(r"\b(um|uh)\b", lesson.cleaned_transcript, re.IGNORECASE) is None
    assert "For every action there is an equal and opposite reaction." in lesson.cleaned_transcript
    assert "homework" not in lesson.cleaned_transcript
    marks = {q.marks for q in lesson.exam_questions}
    assert {3, 4, 5} <= marks
    assert len(lesson.quiz) == 5


def test_later_stages_consume_cleaned_text(model):
    lesson = run(LessonPipeline(model).run("Newton's Third Law", NEWTON_TRANSCRIPT))

    assert model.keys()[0] == "clean"
    stage_two = [call for call in model.calls if call["key"] != "clean"]
    assert sorted(call["key"] for call in stage_two) == ["ExamQuestionSet", "QuizSet", "SummaryWithExamples"]
    for call in stage_two:
        assert lesson.cleaned_transcript in call["prompt"]
        assert "Settle down please." not in call["prompt"]


@pytest.mark.parametrize(
    "topic, transcript",
    [("", "something"), ("topic", ""), ("   ", "something"), ("topic", " \n\t ")],
)
def test_blank_input_is_rejected_without_model_calls(model, topic, transcript):
    with pytest.raises(ValidationError):
        run(LessonPipeline(model).run(topic, transcript))
    assert model.calls == []


def test_clean_failure_stops_before_stage_two():
    model = ScriptedModelClient(failures={"clean": transport_error()})

    with pytest.raises(PipelineError) as info:
        run(LessonPipeline(model).run("Optics", "Light bends when it enters glass."))

    assert info.value.stage == "clean"
    assert info.value.error.kind is ModelErrorKind.TRANSPORT
    assert model.keys() == ["clean"]


@pytest.mark.parametrize(
    "failing_key, stage",
    [("SummaryWithExamples", "summary"), ("ExamQuestionSet", "exam_questions"), ("QuizSet", "quiz")],
)
def test_any_stage_two_failure_discards_lesson(failing_key, stage):
    error = ModelError(ModelErrorKind.SCHEMA_MISMATCH, "bad shape")
    model = ScriptedModelClient(failures={failing_key: error})
    pipeline = LessonPipeline(model)

    for _ in range(2):
        with pytest.raises(PipelineError) as info:
            run(pipeline.run("Optics", "Light bends when it enters glass."))
        assert info.value.stage == stage
        assert info.value.__cause__ is error


def test_stage_two_calls_are_launched_together():
    class GatedClient(ScriptedModelClient):
        def __init__(self):
            super().__init__()
            self.in_flight = 0
            self.all_started = asyncio.Event()

        async def generate(self, prompt, *, schema=None, **kwargs):
            if schema is None:
                return await super().generate(prompt, schema=schema, **kwargs)
            self.in_flight += 1
            if self.in_flight == 3:
                self.all_started.set()
            # Each call waits until all three are in flight; sequential awaiting would time out.
            await asyncio.wait_for(self.all_started.wait(), timeout=1)
            return await super().generate(prompt, schema=schema, **kwargs)

    model = GatedClient()
    lesson = run(LessonPipeline(model).run("Optics", "Light bends when it enters glass."))

    assert model.in_flight == 3
    assert len(lesson.quiz) == 5


def test_lesson_is_immutable(model):
    lesson = run(LessonPipeline(model).run("Optics", "Light bends when it enters glass."))

    with pytest.raises(Exception):
        lesson.summary = "changed"


def test_transcribe_returns_text(model):
    text = run(LessonPipeline(model).transcribe(b"\x00\x01", "audio/mpeg", filename="lecture.mp3", topic="Physics"))

    assert "equal and opposite" in text
    call = model.calls[0]
    assert call["key"] == "transcribe"
    assert call["attachment"].mime_type == "audio/mpeg"
    assert call["prompt"] == "Classroom lecture on Physics."


def test_transcribe_rejects_non_media_without_calls(model):
    with pytest.raises(ValidationError):
        run(LessonPipeline(model).transcribe(b"%PDF", "application/pdf"))
    assert model.calls == []


def test_transcribe_failure_is_transcription_error():
    model = ScriptedModelClient(failures={"transcribe": transport_error("file too large")})

    with pytest.raises(TranscriptionError):
        run(LessonPipeline(model).transcribe(b"\x00", "video/mp4"))


def test_merge_transcript():
    assert merge_transcript("Typed notes.", "Spoken words.") == "Typed notes.\n\nSpoken words."
    assert merge_transcript("", " Spoken words. ") == "Spoken words."
    assert merge_transcript("Typed notes.", "") == "Typed notes."
