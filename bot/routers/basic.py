from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import CallbackQuery, Message

from bot.keyboards import main_menu_kb
from domain.reference import DISCLAIMER, REFERENCES, SUBTITLE, TIPS, TITLE


basic_router = Router()


def reference_text() -> str:
    lines = ["Short references:"]
    lines.extend(f"• {ref}" for ref in REFERENCES)
    lines.extend(["", TIPS, "", DISCLAIMER])
    return "\n".join(lines)


@basic_router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    await message.answer(f"{TITLE}\n{SUBTITLE}\n\nAvailable: /protein, /reference, /help.", reply_markup=main_menu_kb())


@basic_router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(
        "/protein — step-by-step protein estimate\n"
        "/reference — guidelines behind the numbers\n"
        "On the result you can pick a preset, send a custom g/kg factor, copy or print the estimate."
    )


@basic_router.message(Command("reference"))
async def cmd_reference(message: Message) -> None:
    await message.answer(reference_text())


@basic_router.callback_query(F.data == "reference:open")
async def cb_reference(call: CallbackQuery) -> None:
    await call.answer()
    await call.message.answer(reference_text())
