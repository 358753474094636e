from __future__ import annotations

import time
import uuid

import structlog
from aiogram import BaseMiddleware
from aiogram.types import Update


log = structlog.get_logger(__name__)


class TraceMiddleware(BaseMiddleware):
    async def __call__(self, handler, event: Update, data):  # type: ignore[override]
        trace_id = uuid.uuid4().hex[:12]
        data["trace_id"] = trace_id
        started = time.perf_counter()
        log.bind(trace_id=trace_id).info("trace_start", update_id=event.update_id)
        try:
            return await handler(event, data)
        finally:
            took_ms = (time.perf_counter() - started) * 1000.0
            log.bind(trace_id=trace_id).info("trace_end", took_ms=round(took_ms, 1))
