"""Drop-in wrapper that preprocesses every outgoing Telegram text message.

Wrap any client exposing ``send_message(chat_id, text, **kwargs)`` (an
aiogram ``Bot`` or anything shaped like it):

    >>> bot = TelegramProxy(Bot(token), style='telegram_html')
    >>> await bot.send_message(chat_id, long_markdown)  # formatted + chunked

The proxy:
1. Runs the text through the preprocessor (tables -> bullets, safe split)
2. Sends each chunk sequentially through the underlying client
3. Returns the list of API responses, one per chunk
4. Forwards every other attribute (send_photo, send_document, ...) untouched
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from prep_bot.config import ProxySettings
from tg_prep import preprocess

if TYPE_CHECKING:
    from aiogram import Bot

LOGGER = logging.getLogger(__name__)


class TelegramProxy:
    """Preprocessing proxy around a Telegram bot client."""

    def __init__(self, client: Bot | Any, **options: Any) -> None:
        """Initialize proxy.

        Args:
            client: Underlying bot client (required)
            **options: ProxySettings overrides: style, max_chunk_length,
                split, chunk_delay_ms, enabled

        Raises:
            ValueError: If no client is given
            pydantic.ValidationError: If an option has an invalid value
        """
        if client is None:
            raise ValueError('TelegramProxy: client is required')
        self._client = client
        self._settings = ProxySettings(**options)

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the proxy itself does not define
        try:
            client = self.__dict__['_client']
        except KeyError:
            raise AttributeError(name) from None
        return getattr(client, name)

    @property
    def settings(self) -> ProxySettings:
        return self._settings

    async def send_message(self, chat_id: int | str, text: Any, **kwargs: Any) -> list[Any]:
        """Preprocess text and send it as one or more messages.

        Args:
            chat_id: Target chat
            text: Message text (markdown tables, code fences, anything)
            **kwargs: Extra send_message arguments (reply_markup, parse_mode, ...)

        Returns:
            Responses of the underlying client, one per chunk, in order

        Note:
            Errors from the client propagate as-is. Chunks sent before the
            failing one are not rolled back.
        """
        if not self._settings.enabled or not isinstance(text, str) or not text.strip():
            return [await self._client.send_message(chat_id, text, **kwargs)]

        result = preprocess(
            text,
            style=self._settings.style,
            max_chunk_length=self._settings.max_chunk_length,
            split=self._settings.split,
        )

        # Caller's parse_mode (even an explicit None) always wins
        if result.parse_mode and 'parse_mode' not in kwargs:
            kwargs['parse_mode'] = result.parse_mode

        if len(result.chunks) > 1:
            LOGGER.info('Splitting message for chat %s into %d chunks', chat_id, len(result.chunks))

        delay = self._settings.chunk_delay_ms / 1000
        responses: list[Any] = []
        for i, chunk in enumerate(result.chunks):
            if i > 0 and delay > 0:
                await asyncio.sleep(delay)
            LOGGER.debug('Sending chunk %d/%d (%d chars)', i + 1, len(result.chunks), len(chunk))
            responses.append(await self._client.send_message(chat_id, chunk, **kwargs))

        return responses

    def disable(self) -> TelegramProxy:
        """Turn preprocessing off; messages pass through unmodified."""
        self._settings.enabled = False
        return self

    def enable(self) -> TelegramProxy:
        """Turn preprocessing back on."""
        self._settings.enabled = True
        return self


def create_proxy(client: Bot | Any, **options: Any) -> TelegramProxy:
    """Wrap a client with minimal boilerplate (same as TelegramProxy(...))."""
    return TelegramProxy(client, **options)
