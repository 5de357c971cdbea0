"""Telegram Bot API client with camelCase <-> snake_case key transcoding."""
from telegram_bot.bot import Bot, ChatAction
from telegram_bot.errors import BotApiError, BotConfigError, BotError
from telegram_bot.settings import BotSettings
from telegram_bot.uploads import InputFile

__all__ = [
    "Bot",
    "ChatAction",
    "BotSettings",
    "InputFile",
    "BotError",
    "BotConfigError",
    "BotApiError",
]
