from __future__ import annotations

from pydantic import BaseModel, Field

from eduai.schemas.classroom import Role


class StudentResult(BaseModel):
    lesson_id: str
    lesson_topic: str
    score: int
    total_questions: int
    date: str


class StudentProfile(BaseModel):
    id: str
    name: str
    usn: str
    average_score: float
    lessons_completed: int
    attendance: float
    quiz_history: list[StudentResult] = Field(default_factory=list)


class ProgressRequest(BaseModel):
    role: Role
    results: list[StudentResult] = Field(default_factory=list)
    profiles: list[StudentProfile] = Field(default_factory=list)


class NotificationTextRequest(BaseModel):
    role: Role
    context: str
