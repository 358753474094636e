"""Shared fixtures for unit tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage


@pytest.fixture
def state() -> FSMContext:
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=1, chat_id=1, user_id=1))


@pytest.fixture
def make_message():
    def _make(text: str | None) -> AsyncMock:
        message = AsyncMock()
        message.text = text
        message.from_user = SimpleNamespace(id=42)
        return message

    return _make


@pytest.fixture
def make_callback():
    def _make(data: str) -> AsyncMock:
        call = AsyncMock()
        call.data = data
        call.from_user = SimpleNamespace(id=42)
        call.message = AsyncMock()
        return call

    return _make
