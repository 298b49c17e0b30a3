"""
Runtime configuration loaded from SQUAD_* environment variables or a .env file.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_MESSAGE = "Jag fattar inte vad du skriver eller så är jag dum i huvudet. Försök igen."


class BotConfig(BaseSettings):
    """Configuration for the team bot server."""

    command_prefix: str = Field("!", min_length=1, description="Prefix marking a chat message as a command.")
    token_path: str = Field(".token", description="File holding the bot credential.")
    require_token: bool = Field(False, description="Fail startup when the token file is missing.")
    exclude_case_sensitive: bool = Field(
        True, description="Match !name exclusions with plain equality instead of casefolding."
    )
    fallback_message: str = Field(DEFAULT_FALLBACK_MESSAGE, description="Reply sent when a command cannot be parsed.")
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).")

    model_config = SettingsConfigDict(
        env_prefix="SQUAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "BotConfig":
        return cls()


def load_token(path: str, required: bool = False) -> Optional[str]:
    """
    Read the bot credential from a file.

    Args:
        path: Path of the token file
        required: Raise when the file is missing instead of returning None

    Returns:
        The stripped token, or None if the file is absent and not required

    Raises:
        FileNotFoundError: If required and the file does not exist
    """
    token_file = Path(path)
    if not token_file.exists():
        if required:
            raise FileNotFoundError(f"Token file not found: {path}")
        logger.warning(f"Token file {path} not found, continuing without a token")
        return None
    return token_file.read_text(encoding="utf-8").strip()
