from __future__ import annotations

from aiogram.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

from domain.entities import PRESETS


GENDER_OPTIONS = ("male", "female", "other")
ACTIVITY_OPTIONS = ("sedentary", "moderately_active", "active", "athlete")
GOAL_OPTIONS = ("maintenance", "hypertrophy", "weight_loss", "older_adult", "pregnancy")


def choices_kb(options: tuple[str, ...], per_row: int = 2) -> ReplyKeyboardMarkup:
    rows = [
        [KeyboardButton(text=opt) for opt in options[i : i + per_row]]
        for i in range(0, len(options), per_row)
    ]
    return ReplyKeyboardMarkup(keyboard=rows, resize_keyboard=True, one_time_keyboard=True)


def main_menu_kb() -> InlineKeyboardMarkup:
    buttons = [
        [InlineKeyboardButton(text="Calculate protein", callback_data="protein:start")],
        [InlineKeyboardButton(text="References", callback_data="reference:open")],
    ]
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def result_kb(use_custom: bool) -> InlineKeyboardMarkup:
    buttons = [
        [InlineKeyboardButton(text=p.label, callback_data=f"preset:{p.key}")]
        for p in PRESETS
    ]
    if use_custom:
        buttons.append([InlineKeyboardButton(text="Use goal / activity factor", callback_data="protein:custom_off")])
    buttons.append([
        InlineKeyboardButton(text="Copy result", callback_data="protein:copy"),
        InlineKeyboardButton(text="Print", callback_data="protein:print"),
    ])
    return InlineKeyboardMarkup(inline_keyboard=buttons)
