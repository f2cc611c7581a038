from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException

from eduai.api.v1.deps import get_classroom
from eduai.schemas.classroom import BookAppointmentRequest
from eduai.services.classroom_service import ClassroomState

router = APIRouter(tags=["classroom"])


@router.get("/notifications")
def list_notifications(
    role: Literal["teacher", "student"] | None = None,
    classroom: ClassroomState = Depends(get_classroom),
):
    return {"items": [item.model_dump(mode="json") for item in classroom.list_notifications(role)]}


@router.delete("/notifications/{notification_id}")
async def dismiss_notification(notification_id: str, classroom: ClassroomState = Depends(get_classroom)):
    if not classroom.dismiss_notification(notification_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"ok": True}


@router.get("/appointments")
def list_appointments(classroom: ClassroomState = Depends(get_classroom)):
    return {"items": [item.model_dump(mode="json") for item in classroom.appointments]}


@router.post("/appointments", status_code=201)
async def book_appointment(payload: BookAppointmentRequest, classroom: ClassroomState = Depends(get_classroom)):
    return classroom.book_appointment(payload).model_dump(mode="json")
