from __future__ import annotations

import asyncio

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from core.config import settings
from core.logging import configure_from_settings
from bot.routers import make_root_router
from bot.middlewares.logging import LoggingMiddleware
from bot.middlewares.trace import TraceMiddleware


def build_dispatcher() -> Dispatcher:
    dp = Dispatcher(storage=MemoryStorage())
    dp.update.middleware(TraceMiddleware())
    dp.update.middleware(LoggingMiddleware())
    dp.include_router(make_root_router())
    return dp


async def main() -> None:
    if not settings.telegram_bot_token:
        raise SystemExit("TELEGRAM_BOT_TOKEN is not set. Put the token into .env and try again.")

    configure_from_settings()
    # Tokens pasted into .env often carry quotes or spaces
    token = (settings.telegram_bot_token or "").strip().strip("'").strip('"')
    bot = Bot(token=token)
    dp = build_dispatcher()

    await bot.set_my_commands(
        [
            BotCommand(command="start", description="Start"),
            BotCommand(command="help", description="Help"),
            BotCommand(command="protein", description="Estimate daily protein"),
            BotCommand(command="reference", description="Guidelines and disclaimer"),
        ]
    )

    # Long polling, no webhook
    await bot.delete_webhook(drop_pending_updates=True)
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
