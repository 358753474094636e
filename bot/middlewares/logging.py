from __future__ import annotations

import structlog
from aiogram import BaseMiddleware
from aiogram.types import Update


log = structlog.get_logger(__name__)


class LoggingMiddleware(BaseMiddleware):
    async def __call__(self, handler, event: Update, data):  # type: ignore[override]
        state = data.get("raw_state")
        user = data.get("event_from_user")
        log.info("tg_update", type=event.event_type, user_id=getattr(user, "id", None), state=state)
        return await handler(event, data)
