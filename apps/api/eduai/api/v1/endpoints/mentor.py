from __future__ import annotations

from fastapi import APIRouter, Depends

from eduai.api.v1.deps import get_classroom, get_mentor_service
from eduai.schemas.mentor import NotificationTextRequest, ProgressRequest, StudentProfile, StudentResult
from eduai.services.classroom_service import ClassroomState
from eduai.services.mentor_service import MentorService
from eduai.utils.demo_lessons import DEMO_QUIZ_HISTORY, DEMO_STUDENTS

router = APIRouter(prefix="/mentor", tags=["mentor"])


@router.post("/progress")
async def analyze_progress(payload: ProgressRequest, mentor: MentorService = Depends(get_mentor_service)):
    if payload.role == "student":
        dataset = payload.results or [StudentResult.model_validate(item) for item in DEMO_QUIZ_HISTORY]
    else:
        dataset = payload.profiles or [StudentProfile.model_validate(item) for item in DEMO_STUDENTS]
    text = await mentor.analyze_progress(payload.role, dataset)
    return {"role": payload.role, "text": text}


@router.post("/notification", status_code=201)
async def ai_notification(
    payload: NotificationTextRequest,
    classroom: ClassroomState = Depends(get_classroom),
    mentor: MentorService = Depends(get_mentor_service),
):
    text = await mentor.generate_notification(payload.context, payload.role)
    title = "AI Recommendation" if payload.role == "student" else "AI Alert"
    event = classroom.push_notification(payload.role, title, text, category="ai")
    return event.model_dump(mode="json")
