from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["teacher", "student"]
NotificationCategory = Literal["info", "alert", "success", "ai"]


class NotificationEvent(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    target_role: Role
    title: str
    message: str
    category: NotificationCategory = "info"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False


class Appointment(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    student_name: str
    topic: str
    time_slot: str
    date: str
    status: Literal["pending", "confirmed"] = "pending"


class BookAppointmentRequest(BaseModel):
    topic: str
    time_slot: str
    student_name: str = "Current Student"
