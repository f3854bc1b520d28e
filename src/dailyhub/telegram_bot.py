"""Daily Hub Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    filters,
)

from .config import load_config
from .core.router import Tab
from .telegram_handlers import (
    start_handler,
    help_handler,
    make_tab_handler,
    text_handler,
    toggle_handler,
    callback_handler,
)

logger = logging.getLogger(__name__)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config=None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to dailyhub.conf"
        )

    app = Application.builder().token(config.telegram_bot_token).build()
    app.bot_data["config"] = config

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    for tab in Tab:
        app.add_handler(CommandHandler(tab.value, make_tab_handler(tab), filters=auth_filter))
    app.add_handler(CommandHandler("toggle", toggle_handler, filters=auth_filter))

    app.add_handler(CallbackQueryHandler(callback_handler, pattern=r"^(tab|toggle):"))
    app.add_handler(
        MessageHandler(
            auth_filter & filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND,
            text_handler,
        )
    )

    # Handle unauthorized access attempts
    async def unauthorized_handler(update: Update, context):
        user = update.effective_user
        logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
        await update.effective_message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in dailyhub.conf"
        )

    if config.telegram_allowed_users:
        app.add_handler(
            MessageHandler(~auth_filter & filters.ALL, unauthorized_handler)
        )

    return app


def run_bot():
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info("Starting Daily Hub Telegram bot...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
