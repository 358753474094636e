from __future__ import annotations

import structlog
from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import State, StatesGroup
from aiogram.types import BufferedInputFile, CallbackQuery, Message, ReplyKeyboardRemove

from bot.keyboards import (
    ACTIVITY_OPTIONS,
    GENDER_OPTIONS,
    GOAL_OPTIONS,
    choices_kb,
    result_kb,
)
from core.config import settings
from domain.entities import ProteinForm
from domain.errors import InvalidInputError
from domain.reference import ESTIMATE_NOTE
from domain.use_cases import (
    factor_note,
    format_report,
    format_summary,
    parse_number,
    parse_weight,
    result_card,
)


log = structlog.get_logger(__name__)

protein_router = Router()


class ProteinStates(StatesGroup):
    weight = State()
    age = State()
    gender = State()
    activity = State()
    goal = State()
    calories = State()
    meals = State()
    result = State()


async def load_form(state: FSMContext) -> ProteinForm:
    data = await state.get_data()
    return ProteinForm.from_dict(data.get("form"))


async def save_form(state: FSMContext, form: ProteinForm) -> None:
    await state.update_data(form=form.as_dict())


async def update_form(state: FSMContext, **changes) -> ProteinForm:
    form = await load_form(state)
    for name, value in changes.items():
        setattr(form, name, value)
    await save_form(state, form)
    return form


def render_result(form: ProteinForm) -> str:
    est = form.estimate()
    lines = ["Estimate"]
    hint = form.weight_hint()
    if hint:
        lines.append(f"({hint})")
    lines.extend(f"{label}: {value}" for label, value in result_card(est))
    lines.append("")
    lines.append(factor_note(est, form.use_custom))
    lines.append("Send a number between 0.5 and 3.0 to set a custom g/kg factor.")
    lines.append(ESTIMATE_NOTE)
    return "\n".join(lines)


async def show_result(message: Message, state: FSMContext, form: ProteinForm) -> None:
    await state.set_state(ProteinStates.result)
    await message.answer(render_result(form), reply_markup=result_kb(form.use_custom))


@protein_router.message(Command("protein"))
async def cmd_protein(message: Message, state: FSMContext) -> None:
    await state.clear()
    await save_form(state, ProteinForm())
    await state.set_state(ProteinStates.weight)
    await message.answer(
        "Let's estimate your daily protein. Body weight (e.g. 80, 80 kg or 176 lb):",
        reply_markup=ReplyKeyboardRemove(),
    )


@protein_router.callback_query(F.data == "protein:start")
async def cb_protein_start(call: CallbackQuery, state: FSMContext) -> None:
    await call.answer()
    await cmd_protein(call.message, state)


@protein_router.message(ProteinStates.weight)
async def st_weight(message: Message, state: FSMContext) -> None:
    parsed = parse_weight(message.text)
    if parsed is None or parsed[0] <= 0:
        await message.answer("Could not read the weight. Send a number, optionally with kg or lb (e.g. 176 lb).")
        return
    value, unit = parsed
    await update_form(state, weight=value, unit=unit)
    await state.set_state(ProteinStates.age)
    await message.answer("Age (years):")


@protein_router.message(ProteinStates.age)
async def st_age(message: Message, state: FSMContext) -> None:
    age = parse_number(message.text)
    if age is None:
        await message.answer("Please send your age as a number.")
        return
    await update_form(state, age=age)
    await state.set_state(ProteinStates.gender)
    await message.answer("Gender:", reply_markup=choices_kb(GENDER_OPTIONS, per_row=3))


@protein_router.message(ProteinStates.gender, F.text.lower().in_(set(GENDER_OPTIONS)))
async def st_gender(message: Message, state: FSMContext) -> None:
    await update_form(state, gender=message.text.lower())
    await state.set_state(ProteinStates.activity)
    await message.answer("Activity level:", reply_markup=choices_kb(ACTIVITY_OPTIONS))


@protein_router.message(ProteinStates.activity, F.text.lower().in_(set(ACTIVITY_OPTIONS)))
async def st_activity(message: Message, state: FSMContext) -> None:
    await update_form(state, activity=message.text.lower())
    await state.set_state(ProteinStates.goal)
    await message.answer("Goal:", reply_markup=choices_kb(GOAL_OPTIONS))


@protein_router.message(ProteinStates.goal, F.text.lower().in_(set(GOAL_OPTIONS)))
async def st_goal(message: Message, state: FSMContext) -> None:
    await update_form(state, goal=message.text.lower())
    await state.set_state(ProteinStates.calories)
    await message.answer("Daily calories, kcal (0 if unknown):", reply_markup=ReplyKeyboardRemove())


@protein_router.message(ProteinStates.gender)
@protein_router.message(ProteinStates.activity)
@protein_router.message(ProteinStates.goal)
async def st_choice_retry(message: Message) -> None:
    await message.answer("Please pick one of the options on the keyboard.")


@protein_router.message(ProteinStates.calories)
async def st_calories(message: Message, state: FSMContext) -> None:
    calories = parse_number(message.text)
    if calories is None:
        await message.answer("Please send daily calories as a number (0 if unknown).")
        return
    await update_form(state, calories=calories)
    await state.set_state(ProteinStates.meals)
    await message.answer("Meals per day:")


@protein_router.message(ProteinStates.meals)
async def st_meals(message: Message, state: FSMContext) -> None:
    meals = parse_number(message.text)
    if meals is None:
        await message.answer("Please send the number of meals per day.")
        return
    form = await update_form(state, meals=meals)
    est = form.estimate()
    log.info(
        "protein_form_done",
        user_id=getattr(message.from_user, "id", None),
        goal=form.goal,
        activity=form.activity,
        factor=est.selected_factor,
        invalid=est.invalid,
    )
    await show_result(message, state, form)


@protein_router.message(ProteinStates.result)
async def st_custom_factor(message: Message, state: FSMContext) -> None:
    value = parse_number(message.text)
    if value is None:
        await message.answer("Send a g/kg factor between 0.5 and 3.0, or /protein to start over.")
        return
    form = await load_form(state)
    form.set_custom_factor(value)
    form.use_custom = True
    await save_form(state, form)
    await show_result(message, state, form)


@protein_router.callback_query(ProteinStates.result, F.data.startswith("preset:"))
async def cb_preset(call: CallbackQuery, state: FSMContext) -> None:
    form = await load_form(state)
    try:
        preset = form.apply_preset(call.data.split(":", 1)[1])
    except InvalidInputError:
        await call.answer("Unknown preset")
        return
    await save_form(state, form)
    log.info("protein_preset_applied", preset=preset.key, factor=preset.factor)
    await call.answer(f"{preset.label}: {preset.factor} g/kg")
    await call.message.edit_text(render_result(form), reply_markup=result_kb(form.use_custom))


@protein_router.callback_query(ProteinStates.result, F.data == "protein:custom_off")
async def cb_custom_off(call: CallbackQuery, state: FSMContext) -> None:
    form = await update_form(state, use_custom=False)
    await call.answer()
    await call.message.edit_text(render_result(form), reply_markup=result_kb(form.use_custom))


@protein_router.callback_query(ProteinStates.result, F.data == "protein:copy")
async def cb_copy(call: CallbackQuery, state: FSMContext) -> None:
    form = await load_form(state)
    await call.answer()
    await call.message.answer(format_summary(form.estimate()))


@protein_router.callback_query(ProteinStates.result, F.data == "protein:print")
async def cb_print(call: CallbackQuery, state: FSMContext) -> None:
    form = await load_form(state)
    report = format_report(form.estimate(), form.to_input(), title=settings.report_title)
    await call.answer()
    await call.message.answer_document(
        BufferedInputFile(report.encode("utf-8"), filename="protein-estimate.txt"),
        caption="Printable estimate",
    )


@protein_router.callback_query(F.data.startswith("preset:") | F.data.startswith("protein:"))
async def cb_stale_result(call: CallbackQuery) -> None:
    # Form state lives in memory only: after a restart or /protein the old buttons have nothing to act on
    await call.answer("This result has expired. Start again with /protein", show_alert=True)
