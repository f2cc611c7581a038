from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ExamQuestionType = Literal["Very Short", "Short", "Medium", "Long"]

# Marks and answer length share one ordinal scale.
MARKS_TO_TYPE: dict[int, str] = {
    1: "Very Short",
    2: "Very Short",
    3: "Short",
    4: "Medium",
    5: "Long",
}

QUIZ_LENGTH = 5
QUIZ_OPTION_COUNT = 4
EXAMPLE_COUNT = 3


class ExamQuestion(BaseModel):
    question: str
    marks: Literal[1, 2, 3, 4, 5] = Field(description="Must be 1, 2, 3, 4, or 5")
    type: ExamQuestionType
    answer_key: str = Field(description="A concise model answer or key points expected in the answer.")

    @model_validator(mode="after")
    def align_type_with_marks(self) -> ExamQuestion:
        self.type = MARKS_TO_TYPE[self.marks]
        return self


class QuizQuestion(BaseModel):
    id: int
    question: str
    options: list[str] = Field(
        min_length=QUIZ_OPTION_COUNT,
        max_length=QUIZ_OPTION_COUNT,
        description="Array of 4 possible answers",
    )
    correct_answer: int = Field(ge=0, le=QUIZ_OPTION_COUNT - 1, description="Index of the correct option (0-3)")
    explanation: str = Field(description="A brief explanation of why the correct answer is the right choice.")

    @model_validator(mode="after")
    def correct_answer_in_options(self) -> QuizQuestion:
        if self.correct_answer >= len(self.options):
            raise ValueError("correct_answer must index one of the options")
        return self


class SummaryWithExamples(BaseModel):
    summary: str = Field(description="A comprehensive summary of the lesson.")
    examples: list[str] = Field(
        min_length=EXAMPLE_COUNT,
        max_length=EXAMPLE_COUNT,
        description="3 real-life analogies or examples explaining the concept.",
    )


class ExamQuestionSet(BaseModel):
    questions: list[ExamQuestion] = Field(min_length=1)


class QuizSet(BaseModel):
    questions: list[QuizQuestion] = Field(min_length=QUIZ_LENGTH, max_length=QUIZ_LENGTH)

    @field_validator("questions")
    @classmethod
    def unique_ids(cls, questions: list[QuizQuestion]) -> list[QuizQuestion]:
        ids = [q.id for q in questions]
        if len(set(ids)) != len(ids):
            raise ValueError("quiz question ids must be unique")
        return questions


class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    topic: str
    raw_transcript: str
    cleaned_transcript: str | None = None
    summary: str | None = None
    real_life_examples: list[str] = Field(default_factory=list)
    exam_questions: list[ExamQuestion] = Field(default_factory=list)
    quiz: list[QuizQuestion] = Field(default_factory=list)
    is_processing: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CreateLessonRequest(BaseModel):
    topic: str
    transcript: str
    owner: str = "teacher"


class TranscriptionResponse(BaseModel):
    filename: str
    text: str
    transcript: str


class QuizSubmission(BaseModel):
    answers: dict[int, int] = Field(default_factory=dict)


class QuizQuestionResult(BaseModel):
    id: int
    chosen: int | None = None
    correct_answer: int
    is_correct: bool
    explanation: str


class QuizResult(BaseModel):
    lesson_id: str
    score: int
    total: int
    results: list[QuizQuestionResult]
