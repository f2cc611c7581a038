from __future__ import annotations

import asyncio
import re

import pytest

from eduai.core.errors import ModelError, ModelErrorKind
from eduai.schemas.lesson import ExamQuestionSet, QuizSet, SummaryWithExamples
from eduai.services.model_client import ModelClient

NEWTON_TRANSCRIPT = (
    "So, um, good morning everyone. Settle down please. Um, today, uh, we're gonna talk about, you know, "
    "Newton's Third Law. For every action there is an equal and opposite reaction. "
    "Uh, like, when you push on a wall, the wall pushes back on you with the same force. "
    "Ha, my coffee pushed back this morning too. Anyway, homework is due Friday."
)

FILLER = re.compile(r"\b(um|uh|like|you know)\b,?\s*", re.IGNORECASE)
ASIDES = ("Settle down please.", "Ha, my coffee pushed back this morning too.", "Anyway, homework is due Friday.")


def fake_clean(prompt: str) -> str:
    transcript = prompt.split("Transcript:\n", 1)[1]
    for aside in ASIDES:
        transcript = transcript.replace(aside, "")
    transcript = FILLER.sub("", transcript).replace("So, good morning everyone.", "")
    return re.sub(r"\s+", " ", transcript).strip()


SUMMARY = {
    "summary": "Forces always occur in equal and opposite pairs acting on two different objects.",
    "examples": [
        "Walking: you push the ground back and it pushes you forward.",
        "Rocket launch: exhaust is pushed down and the rocket is pushed up.",
        "Rowing: the paddle pushes water back and the boat moves forward.",
    ],
}

EXAM_QUESTIONS = {
    "questions": [
        {"question": "State Newton's Third Law.", "marks": 1, "type": "Very Short", "answer_key": "Equal and opposite reaction."},
        {"question": "Give one example of an action-reaction pair.", "marks": 2, "type": "Very Short", "answer_key": "Walking."},
        {"question": "Explain the law with an example.", "marks": 3, "type": "Short", "answer_key": "Pushing a wall."},
        {"question": "Why can rockets move in space?", "marks": 4, "type": "Medium", "answer_key": "Exhaust reaction."},
        {"question": "Compare jumping from a boat and a dock.", "marks": 5, "type": "Long", "answer_key": "Recoil."},
    ]
}

QUIZ = {
    "questions": [
        {
            "id": i,
            "question": f"Question {i} about action and reaction?",
            "options": ["Same object", "Different objects", "No objects", "Gravity only"],
            "correct_answer": 1,
            "explanation": "Action and reaction act on different objects.",
        }
        for i in range(1, 6)
    ]
}

SCHEMA_RESPONSES = {
    SummaryWithExamples: SUMMARY,
    ExamQuestionSet: EXAM_QUESTIONS,
    QuizSet: QUIZ,
}


class ScriptedModelClient(ModelClient):
    """Answers every request locally and records what was asked.

    ``failures`` maps a call key (``clean``, ``SummaryWithExamples``,
    ``ExamQuestionSet``, ``QuizSet``, ``chat``, ``transcribe``, ``text``) to the
    ModelError to raise for it.
    """

    def __init__(self, failures: dict[str, ModelError] | None = None, replies: dict[str, str] | None = None) -> None:
        super().__init__(client=object(), model="test-model")
        self.failures = failures or {}
        self.replies = replies or {}
        self.calls: list[dict] = []

    @staticmethod
    def call_key(prompt, schema, attachment, system) -> str:
        if attachment is not None:
            return "transcribe"
        if schema is not None:
            return schema.__name__
        if system is not None:
            return "chat"
        if prompt.startswith("You are an expert educational editor"):
            return "clean"
        return "text"

    async def generate(self, prompt, *, schema=None, attachment=None, system=None, history=()):
        key = self.call_key(prompt, schema, attachment, system)
        self.calls.append(
            {"key": key, "prompt": prompt, "system": system, "history": list(history), "attachment": attachment}
        )
        await asyncio.sleep(0)
        if key in self.failures:
            raise self.failures[key]
        if key in self.replies:
            return self.replies[key]
        if schema is not None:
            return schema.model_validate(SCHEMA_RESPONSES[schema])
        if key == "clean":
            return fake_clean(prompt)
        if key == "transcribe":
            return "Newton's Third Law says every action has an equal and opposite reaction."
        if key == "chat":
            return f"Tutor reply to: {prompt}"
        return "Keep reviewing action-reaction pairs."

    def keys(self) -> list[str]:
        return [call["key"] for call in self.calls]


def transport_error(message: str = "connection reset") -> ModelError:
    return ModelError(ModelErrorKind.TRANSPORT, message)


@pytest.fixture
def model() -> ScriptedModelClient:
    return ScriptedModelClient()
