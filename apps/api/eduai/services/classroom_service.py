from __future__ import annotations

import logging
import uuid
from datetime import date

from eduai.core.config import settings
from eduai.core.errors import NotFoundError, ValidationError
from eduai.core.scheduler import ExpiryScheduler
from eduai.schemas.classroom import Appointment, BookAppointmentRequest, NotificationEvent
from eduai.schemas.lesson import Lesson, QuizQuestionResult, QuizResult
from eduai.utils.demo_lessons import DEMO_LESSONS

logger = logging.getLogger(__name__)


class ClassroomState:
    """In-memory lessons, notifications and appointments for one running app."""

    def __init__(self, notification_ttl_seconds: float | None = None, seed_demo: bool = False) -> None:
        self.lessons: list[Lesson] = []
        self.notifications: list[NotificationEvent] = []
        self.appointments: list[Appointment] = []
        self.notification_ttl_seconds = (
            settings.notification_ttl_seconds if notification_ttl_seconds is None else notification_ttl_seconds
        )
        self.expiry = ExpiryScheduler()
        self._generations: dict[str, str] = {}
        if seed_demo:
            self.lessons = [Lesson.model_validate(item) for item in DEMO_LESSONS]

    # Lessons

    def list_lessons(self) -> list[Lesson]:
        return list(self.lessons)

    def get_lesson(self, lesson_id: str) -> Lesson:
        for lesson in self.lessons:
            if lesson.id == lesson_id:
                return lesson
        raise NotFoundError("Lesson not found")

    def add_lesson(self, lesson: Lesson) -> Lesson:
        self.lessons.insert(0, lesson)
        logger.info("Published lesson %s (%s)", lesson.id, lesson.topic)
        self.push_notification("student", "New Lesson Added", f"Teacher has published a new lesson: {lesson.topic}")
        return lesson

    def begin_generation(self, owner: str) -> str:
        token = str(uuid.uuid4())
        self._generations[owner] = token
        return token

    def is_current_generation(self, owner: str, token: str) -> bool:
        return self._generations.get(owner) == token

    def finish_generation(self, owner: str, token: str) -> None:
        if self.is_current_generation(owner, token):
            self._generations.pop(owner, None)

    # Quiz

    def grade_quiz(self, lesson_id: str, answers: dict[int, int]) -> QuizResult:
        lesson = self.get_lesson(lesson_id)
        results = []
        for question in lesson.quiz:
            chosen = answers.get(question.id)
            results.append(
                QuizQuestionResult(
                    id=question.id,
                    chosen=chosen,
                    correct_answer=question.correct_answer,
                    is_correct=chosen is not None and chosen == question.correct_answer,
                    explanation=question.explanation,
                )
            )
        score = sum(1 for item in results if item.is_correct)
        total = len(lesson.quiz)

        self.push_notification(
            "teacher",
            "Quiz Result",
            f"Student completed {lesson.topic} with score {score}/{total}",
            category="success",
        )
        self.push_notification("student", "Quiz Submitted", "Your results have been sent to your teacher.", category="success")
        return QuizResult(lesson_id=lesson.id, score=score, total=total, results=results)

    # Appointments

    def book_appointment(self, payload: BookAppointmentRequest) -> Appointment:
        if not payload.topic.strip() or not payload.time_slot.strip():
            raise ValidationError("Please select a slot and enter a topic.")
        appointment = Appointment(
            student_name=payload.student_name,
            topic=payload.topic.strip(),
            time_slot=payload.time_slot.strip(),
            date=date.today().isoformat(),
        )
        self.appointments.append(appointment)
        self.push_notification(
            "teacher",
            "New Doubt Session Request",
            f"{appointment.student_name} requested a session on {appointment.topic}",
            category="alert",
        )
        self.push_notification(
            "student", "Request Sent", "Your appointment request has been sent to the teacher.", category="success"
        )
        return appointment

    # Notifications

    def push_notification(self, target_role: str, title: str, message: str, category: str = "info") -> NotificationEvent:
        event = NotificationEvent(target_role=target_role, title=title, message=message, category=category)
        self.notifications.insert(0, event)
        self.expiry.schedule(event.id, self.notification_ttl_seconds, self._expire)
        return event

    def list_notifications(self, role: str | None = None) -> list[NotificationEvent]:
        if role is None:
            return list(self.notifications)
        return [item for item in self.notifications if item.target_role == role]

    def dismiss_notification(self, notification_id: str) -> bool:
        self.expiry.cancel(notification_id)
        return self._remove(notification_id)

    def _expire(self, notification_id: str) -> None:
        self._remove(notification_id)

    def _remove(self, notification_id: str) -> bool:
        before = len(self.notifications)
        self.notifications = [item for item in self.notifications if item.id != notification_id]
        return len(self.notifications) != before

    def close(self) -> None:
        self.expiry.cancel_all()
