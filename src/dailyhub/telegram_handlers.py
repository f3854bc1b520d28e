"""Telegram command and callback handlers."""

import logging

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes

from .config import Config
from .core.router import Tab
from .core.screens import render_screen
from .core.session import Session
from .core.tasks import TaskNotFoundError
from .telegram_format import edit_markdown, escape_text, send_markdown

logger = logging.getLogger(__name__)

# Telegram caps buttons per inline keyboard; older tasks use /toggle.
MAX_TOGGLE_BUTTONS = 20

HELP_TEXT = (
    "Daily Hub - Notes, Tasks and Calendar.\n\n"
    "Send any text to add it to the current tab.\n\n"
    "Commands:\n"
    "/notes - Show notes\n"
    "/tasks - Show tasks\n"
    "/calendar - Show calendar\n"
    "/toggle ID - Check/uncheck a task\n"
    "/help - Show this help"
)


def get_session(context: ContextTypes.DEFAULT_TYPE) -> Session:
    """Get this chat's session, starting one on first use."""
    session = context.chat_data.get("session")
    if session is None:
        config = context.bot_data.get("config") or Config()
        session = Session.from_config(config)
        context.chat_data["session"] = session
        logger.info(f"Started session on {session.current_tab.value}")
    return session


def is_authorized(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """Allow-list check for updates that command filters don't cover."""
    config = context.bot_data.get("config")
    if config is None or not config.telegram_allowed_users:
        return True
    user = update.effective_user
    return user is not None and user.id in config.telegram_allowed_users


def build_keyboard(session: Session) -> InlineKeyboardMarkup:
    """Inline keyboard: toggles for the newest tasks on the Tasks tab, then the tab bar."""
    rows = []
    if session.current_tab is Tab.TASKS:
        for task in session.tasks.list_tasks()[:MAX_TOGGLE_BUTTONS]:
            rows.append(
                [
                    InlineKeyboardButton(
                        f"{task.action_label} #{task.id}",
                        callback_data=f"toggle:{task.id}",
                    )
                ]
            )

    rows.append(
        [
            InlineKeyboardButton(
                f"• {tab.title}" if tab is session.current_tab else tab.title,
                callback_data=f"tab:{tab.value}",
            )
            for tab in Tab
        ]
    )
    return InlineKeyboardMarkup(rows)


def screen_text(session: Session) -> str:
    """Current screen as markdown, with user text escaped."""
    text = render_screen(session, escape=escape_text)
    hidden = len(session.tasks) - MAX_TOGGLE_BUTTONS
    if session.current_tab is Tab.TASKS and hidden > 0:
        text += (
            f"\n\nButtons cover the {MAX_TOGGLE_BUTTONS} newest tasks; "
            f"use /toggle ID for the other {hidden}."
        )
    return text


async def show_screen(update: Update, session: Session):
    """Send the current screen as a new message."""
    await send_markdown(
        update.effective_message,
        screen_text(session),
        reply_markup=build_keyboard(session),
    )


# ============== Commands ==============


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    session = get_session(context)
    await update.effective_message.reply_text(HELP_TEXT)
    await show_screen(update, session)


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.effective_message.reply_text(HELP_TEXT)


def make_tab_handler(tab: Tab):
    """Build a /notes, /tasks or /calendar handler."""

    async def tab_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
        session = get_session(context)
        session.router.select_tab(tab)
        await show_screen(update, session)

    tab_handler.__doc__ = f"Handle /{tab.value} command."
    return tab_handler


async def toggle_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /toggle <id> - for tasks beyond the keyboard's buttons."""
    message = update.effective_message
    session = get_session(context)
    args = context.args or []

    try:
        task_id = int(args[0])
    except (IndexError, ValueError):
        await message.reply_text("Usage: /toggle ID")
        return

    try:
        task = session.tasks.toggle_task(task_id)
    except TaskNotFoundError as e:
        await message.reply_text(str(e))
        return

    if task is None:
        await message.reply_text(f"No task #{task_id}.")
        return

    session.router.select_tab(Tab.TASKS)
    await show_screen(update, session)


# ============== Messages ==============


async def text_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle plain text - add a note or task on the current tab."""
    message = update.effective_message
    session = get_session(context)
    text = message.text or ""
    tab = session.current_tab

    if tab is Tab.CALENDAR:
        await message.reply_text("Nothing to add on the Calendar tab.")
        return

    if tab is Tab.NOTES:
        item = session.notes.add_note(text)
    else:
        item = session.tasks.add_task(text)

    if item is None:
        await message.reply_text("Nothing to add.")
        return

    await show_screen(update, session)


# ============== Inline Buttons ==============


async def callback_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle tab:<name> and toggle:<id> button presses."""
    query = update.callback_query
    if not is_authorized(update, context):
        await query.answer("Unauthorized.")
        return

    session = get_session(context)
    action, _, value = (query.data or "").partition(":")

    if action == "tab":
        try:
            tab = Tab.parse(value)
        except ValueError as e:
            logger.warning(f"Bad tab callback: {e}")
            await query.answer("Unknown tab.")
            return
        # Redraw even when already selected: the pressed message may be stale.
        session.router.select_tab(tab)

    elif action == "toggle":
        try:
            task = session.tasks.toggle_task(int(value))
        except ValueError:
            logger.warning(f"Bad toggle callback: {query.data!r}")
            await query.answer("Unknown task.")
            return
        except TaskNotFoundError as e:
            await query.answer(str(e))
            return
        if task is None:
            await query.answer("That task no longer exists.")
            return

    else:
        logger.warning(f"Unknown callback data: {query.data!r}")
        await query.answer()
        return

    await query.answer()
    await edit_markdown(query, screen_text(session), reply_markup=build_keyboard(session))
