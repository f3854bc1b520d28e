"""Telegram message formatting utilities."""

import logging
import re

import telegramify_markdown
from telegram.error import BadRequest

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096
# Limit on source markdown per message; MarkdownV2 escaping can roughly double it.
CHUNK_SOURCE_LENGTH = 2000

_ASCII_PUNCTUATION = re.compile(r"([!-/:-@\[-`{-~])")


def escape_text(text: str) -> str:
    """Backslash-escape markdown punctuation so user text renders literally."""
    return _ASCII_PUNCTUATION.sub(r"\\\1", text)


def split_markdown(text: str, limit: int = CHUNK_SOURCE_LENGTH) -> list[str]:
    """
    Split markdown into chunks of at most `limit` characters.

    Splits on line boundaries where possible. Lines longer than the limit
    are cut, but never between a backslash and the character it escapes.
    """
    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            cut = limit
            while cut > 1 and line[cut - 1] == "\\":
                cut -= 1
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:cut])
            line = line[cut:]

        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate

    if current.strip():
        chunks.append(current)
    return chunks or [text]


def to_markdown_v2(text: str) -> list[str]:
    """Convert markdown to Telegram MarkdownV2, one string per message."""
    messages = []
    for chunk in split_markdown(text):
        converted = telegramify_markdown.markdownify(chunk)
        if len(converted) > MAX_MESSAGE_LENGTH:
            logger.warning(f"Converted chunk is {len(converted)} chars, over the message limit")
        messages.append(converted)
    return messages


async def send_markdown(message, text: str, *, reply_markup=None):
    """Reply with markdown text, split across messages; the keyboard goes on the last one."""
    messages = to_markdown_v2(text)
    for i, chunk in enumerate(messages):
        await message.reply_text(
            chunk,
            parse_mode="MarkdownV2",
            reply_markup=reply_markup if i == len(messages) - 1 else None,
        )


async def edit_markdown(query, text: str, *, reply_markup=None):
    """
    Replace a callback query's message in place.

    The first chunk (with the keyboard) replaces the message; any overflow
    is sent as follow-up messages. Editing to identical content is ignored.
    """
    first, *rest = to_markdown_v2(text)
    try:
        await query.edit_message_text(first, parse_mode="MarkdownV2", reply_markup=reply_markup)
    except BadRequest as e:
        if "not modified" not in str(e).lower():
            raise
        logger.debug("Message already up to date")

    if rest and query.message is not None:
        for chunk in rest:
            await query.message.reply_text(chunk, parse_mode="MarkdownV2")
