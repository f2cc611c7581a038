from __future__ import annotations

import json
from collections.abc import Sequence

from eduai.core.errors import ModelError, TranscriptionError, ValidationError
from eduai.schemas.chat import ChatMessage
from eduai.schemas.lesson import ExamQuestion, ExamQuestionSet, QuizQuestion, QuizSet, SummaryWithExamples
from eduai.services.model_client import Attachment, ModelClient

MEDIA_PREFIXES = ("audio/", "video/")


async def transcribe_media(
    client: ModelClient,
    data: bytes,
    mime_type: str,
    filename: str = "upload",
    topic: str | None = None,
) -> str:
    if not mime_type.startswith(MEDIA_PREFIXES):
        raise ValidationError("Please upload a valid video or audio file.")
    if not data:
        raise ValidationError("Uploaded file is empty.")

    # The transcription endpoint treats the prompt as a vocabulary hint, not an instruction.
    hint = f"Classroom lecture on {topic}." if topic else ""
    try:
        return await client.generate(hint, attachment=Attachment(data=data, mime_type=mime_type, filename=filename))
    except ModelError as exc:
        raise TranscriptionError(
            "Failed to transcribe media. The file might be too large or the format unsupported."
        ) from exc


async def clean_transcript(client: ModelClient, raw_text: str) -> str:
    prompt = (
        "You are an expert educational editor. Your task is to clean the following lecture transcript.\n"
        "1. Remove all conversational fillers (um, uh, ah, like, you know).\n"
        "2. Remove jokes, off-topic banter, and classroom administrative talk.\n"
        "3. Strictly preserve the educational content, facts, and explanations.\n"
        '4. The output should be the "Filtered Text" ready for study. Output plain text only.\n\n'
        f"Transcript:\n{raw_text}"
    )
    return await client.generate(prompt)


async def summarize_with_examples(client: ModelClient, cleaned_text: str) -> SummaryWithExamples:
    prompt = (
        "Based on the following educational text, provide a concise summary and exactly 3 distinct "
        "real-life examples that help explain the concepts.\n\n"
        f"Text: {cleaned_text}"
    )
    return await client.generate(prompt, schema=SummaryWithExamples)


async def generate_exam_questions(client: ModelClient, cleaned_text: str) -> list[ExamQuestion]:
    prompt = (
        "Create a set of exam questions based on this filtered educational text.\n"
        "Generate a balanced mix of questions worth 1, 2, 3, 4, and 5 marks, with at least one "
        "question in each tier where the material allows.\n"
        "- 1-2 marks: Very Short Answer (Definitions, simple facts)\n"
        "- 3 marks: Short Answer (Explanations)\n"
        "- 4 marks: Medium Answer (Reasoning, comparisons)\n"
        "- 5 marks: Long Answer (Detailed description, derivation, or complex application)\n\n"
        "Include a brief answer key or main points for each question.\n\n"
        f"Text: {cleaned_text}"
    )
    result = await client.generate(prompt, schema=ExamQuestionSet)
    return result.questions


async def generate_quiz(client: ModelClient, cleaned_text: str) -> list[QuizQuestion]:
    prompt = (
        "Create a multiple-choice quiz with exactly 5 questions based on this filtered text to test "
        "understanding. Number the questions with ids 1 to 5. Each question has exactly 4 options and "
        "correct_answer is the zero-based index of the right option. Include an explanation for the "
        "correct answer.\n\n"
        f"Text: {cleaned_text}"
    )
    result = await client.generate(prompt, schema=QuizSet)
    return result.questions


def tutor_instruction(context: str) -> str:
    return (
        "You are a helpful AI tutor assistant. You have access to the following lesson content: "
        f'"{context}".\n'
        "Only answer from this lesson content. Your goal is to help the student understand this specific lesson.\n"
        "Track the student's learning behavior. If they seem confused, offer simpler explanations.\n"
        'Always ask for feedback at the end of your explanation, like "Does that make sense?" or '
        '"Shall we try another example?"'
    )


async def chat_turn(client: ModelClient, context: str, history: Sequence[ChatMessage], text: str) -> str:
    return await client.generate(text, system=tutor_instruction(context), history=history)


def _progress_prompt(role: str, data: str) -> str:
    if role == "student":
        return (
            f"You are an AI Student Mentor. Analyze the following quiz history for a student: {data}.\n"
            "1. Identify the student's strong subjects and weak areas based on scores.\n"
            "2. Provide personalized, encouraging advice on what to focus on next.\n"
            '3. Suggest specific study strategies (e.g., "Review Newton\'s laws again").\n'
            "Keep the tone motivating and constructive. Output plain text."
        )
    return (
        f"You are an AI Classroom Assistant for a teacher. Analyze the following class performance data: {data}.\n"
        "1. Identify students who are falling behind (low scores/attendance).\n"
        "2. Suggest topics that the whole class seems to struggle with, if any patterns exist.\n"
        "3. Recommend intervention strategies for the teacher.\n"
        "Keep the tone professional and actionable. Output plain text."
    )


async def progress_analysis(client: ModelClient, role: str, records: list[dict]) -> str:
    return await client.generate(_progress_prompt(role, json.dumps(records, default=str)))


async def notification_text(client: ModelClient, context: str, role: str) -> str:
    if role == "student":
        prompt = (
            "You are a student mentor. Generate a short, motivating study tip or notification "
            f'(max 20 words) based on this context: "{context}".'
        )
    else:
        prompt = (
            "You are a teacher assistant. Generate a short professional alert (max 20 words) "
            f'based on this context: "{context}".'
        )
    return await client.generate(prompt)
