"""Telegram client wrapper and command line surface for tg_prep."""

from prep_bot.proxy import TelegramProxy, create_proxy

__all__ = ['TelegramProxy', 'create_proxy']
