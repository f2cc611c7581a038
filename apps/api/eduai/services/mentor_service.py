from __future__ import annotations

import logging

from eduai.core.errors import ModelError
from eduai.schemas.mentor import StudentProfile, StudentResult
from eduai.services.model_client import ModelClient, model_client
from eduai.services.stages import notification_text, progress_analysis

logger = logging.getLogger(__name__)

ANALYSIS_FALLBACK = "I'm having trouble analyzing the data right now."
NOTIFICATION_FALLBACK = "New update available."


class MentorService:
    def __init__(self, client: ModelClient | None = None) -> None:
        self.client = client or model_client

    async def analyze_progress(self, role: str, dataset: list[StudentResult] | list[StudentProfile]) -> str:
        records = [item.model_dump(mode="json") for item in dataset]
        try:
            return await progress_analysis(self.client, role, records)
        except ModelError as exc:
            logger.warning("Progress analysis for %s unavailable: %s", role, exc)
            return ANALYSIS_FALLBACK

    async def generate_notification(self, context: str, role: str) -> str:
        try:
            return await notification_text(self.client, context, role)
        except ModelError as exc:
            logger.warning("Notification text for %s unavailable: %s", role, exc)
            return NOTIFICATION_FALLBACK


mentor_service = MentorService()
