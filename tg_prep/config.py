"""Constants and data models for Telegram text preprocessing."""

from dataclasses import dataclass, field
from typing import Literal

from aiogram.enums import ParseMode

# Telegram allows max 4096 characters per message
TELEGRAM_MAX_LENGTH = 4096

# Extra characters scanned past the cut when looking for entities/tags/<pre>
LOOKAHEAD = 200

# Fence placeholders use NUL so they never collide with chat text
FENCE_PLACEHOLDER_PREFIX = '\x00FENCE'
FENCE_PLACEHOLDER_SUFFIX = '\x00'

# Table bullet rendering
BULLET = '\N{BULLET}'  # •
CELL_SEPARATOR = ' \N{MIDDLE DOT} '  #  ·
EMPTY_CELL = '\N{EM DASH}'  # —

Style = Literal['telegram_plain', 'telegram_html']

PLAIN_STYLE: Style = 'telegram_plain'
HTML_STYLE: Style = 'telegram_html'


@dataclass(frozen=True)
class FenceBlock:
    """Fenced code block lifted out of the text before rewriting.

    Attributes:
        lang: Language tag following the opening fence ('' if none)
        body: Code between the fences, without the separating newline and
            indentation
        fence: Fence marker, either ``` or ~~~
        close: Exact text between body and closing fence, kept for plain
            restoration. Usually a newline, followed by indentation inside
            list items; empty when the fence closes on the code line
    """

    lang: str
    body: str
    fence: str = '```'
    close: str = '\n'


@dataclass(frozen=True)
class PreprocessResult:
    """Output of the preprocessing pipeline.

    Attributes:
        chunks: Ordered message chunks, each meant for one sendMessage call
        parse_mode: ParseMode.HTML for HTML style, None for plain text
    """

    chunks: list[str] = field(default_factory=list)
    parse_mode: ParseMode | None = None
