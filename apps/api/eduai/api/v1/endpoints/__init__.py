from __future__ import annotations

from eduai.api.v1.endpoints import chat, classroom, lessons, mentor

__all__ = ["chat", "classroom", "lessons", "mentor"]
