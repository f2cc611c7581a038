from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eduai.api.v1.router import api_router
from eduai.core.config import settings
from eduai.core.errors import (
    ChatBusyError,
    NotFoundError,
    PipelineError,
    TranscriptionError,
    ValidationError,
)
from eduai.core.logging import configure_logging
from eduai.services.classroom_service import ClassroomState


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    app.state.classroom = ClassroomState(seed_demo=settings.seed_demo_lessons)
    yield
    app.state.classroom.close()


app = FastAPI(
    title="EduAI API",
    version="1.0.0",
    description="Turns lecture transcripts into notes, summaries, exam questions and quizzes.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(_: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(_: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(PipelineError)
async def pipeline_error_handler(_: Request, exc: PipelineError):
    return JSONResponse(
        status_code=502,
        content={"detail": "AI processing failed. Please try again.", "stage": exc.stage, "reason": exc.error.kind.value},
    )


@app.exception_handler(TranscriptionError)
async def transcription_error_handler(_: Request, exc: TranscriptionError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(ChatBusyError)
async def chat_busy_handler(_: Request, exc: ChatBusyError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(api_router, prefix=settings.api_v1_prefix)
