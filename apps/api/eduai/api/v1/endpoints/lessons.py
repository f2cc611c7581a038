from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from eduai.api.v1.deps import get_classroom, get_pipeline
from eduai.core.config import settings
from eduai.schemas.lesson import CreateLessonRequest, Lesson, QuizSubmission, TranscriptionResponse
from eduai.services.classroom_service import ClassroomState
from eduai.services.pipeline_service import LessonPipeline, merge_transcript

router = APIRouter(prefix="/lessons", tags=["lessons"])


def _serialize_summary(lesson: Lesson) -> dict:
    return {
        "id": lesson.id,
        "topic": lesson.topic,
        "summary": lesson.summary,
        "exam_question_count": len(lesson.exam_questions),
        "quiz_length": len(lesson.quiz),
        "created_at": lesson.created_at.isoformat(),
    }


@router.get("")
def list_lessons(classroom: ClassroomState = Depends(get_classroom)):
    return {"items": [_serialize_summary(lesson) for lesson in classroom.list_lessons()]}


@router.get("/{lesson_id}")
def get_lesson(lesson_id: str, classroom: ClassroomState = Depends(get_classroom)):
    return classroom.get_lesson(lesson_id).model_dump(mode="json")


@router.post("", status_code=201)
async def create_lesson(
    payload: CreateLessonRequest,
    classroom: ClassroomState = Depends(get_classroom),
    pipeline: LessonPipeline = Depends(get_pipeline),
):
    token = classroom.begin_generation(payload.owner)
    try:
        lesson = await pipeline.run(payload.topic, payload.transcript)
    finally:
        superseded = not classroom.is_current_generation(payload.owner, token)
        classroom.finish_generation(payload.owner, token)

    if superseded:
        raise HTTPException(status_code=409, detail="A newer lesson request replaced this one.")

    classroom.add_lesson(lesson)
    classroom.push_notification("teacher", "Success", "Lesson created and pushed to students!", category="success")
    return lesson.model_dump(mode="json")


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    file: UploadFile = File(...),
    topic: str | None = Form(None),
    notes: str = Form(""),
    pipeline: LessonPipeline = Depends(get_pipeline),
):
    too_large = HTTPException(status_code=413, detail=f"File exceeds the {settings.max_upload_mb} MB upload limit.")
    if file.size is not None and file.size > settings.max_upload_bytes:
        raise too_large
    data = await file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise too_large

    filename = file.filename or "upload"
    text = await pipeline.transcribe(data, file.content_type or "", filename=filename, topic=topic)
    return {"filename": filename, "text": text, "transcript": merge_transcript(notes, text)}


@router.post("/{lesson_id}/quiz")
async def submit_quiz(lesson_id: str, payload: QuizSubmission, classroom: ClassroomState = Depends(get_classroom)):
    return classroom.grade_quiz(lesson_id, payload.answers).model_dump(mode="json")
