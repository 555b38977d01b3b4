from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tg_prep.config import PLAIN_STYLE, TELEGRAM_MAX_LENGTH, Style


class ProxySettings(BaseSettings):
    """Preprocessing options for the proxy and the CLI.

    Values come from TG_PREP_* environment variables (or .env); keyword
    arguments passed to the constructor take precedence.
    """

    if Path('.env').exists():
        model_config = SettingsConfigDict(
            env_prefix='TG_PREP_', env_file='.env', env_file_encoding='utf-8', extra='ignore'
        )
    else:
        model_config = SettingsConfigDict(env_prefix='TG_PREP_', extra='ignore')

    style: Style = PLAIN_STYLE
    max_chunk_length: int = Field(default=TELEGRAM_MAX_LENGTH, gt=0)
    split: bool = True

    # Pause between chunks of one message, keeps us under flood limits
    chunk_delay_ms: int = Field(default=300, ge=0)

    # False turns the proxy into a plain passthrough
    enabled: bool = True

    # Logging level
    logging_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'INFO'


CONFIG = ProxySettings()
