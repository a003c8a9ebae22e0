"""Process configuration loaded once from the environment at startup."""

import os
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.gumloop.com/api/v1"

API_KEY_ENV = "GUMLOOP_API_KEY"
BASE_URL_ENV = "GUMLOOP_BASE_URL"
TIMEOUT_ENV = "GUMLOOP_TIMEOUT"
LOG_LEVEL_ENV = "GUMLOOP_LOG_LEVEL"


class GumloopConfig(BaseModel):
    """
    Immutable settings shared by the gateway for the lifetime of the process.

    Attributes:
        api_key: Bearer credential sent with every request.
        base_url: Root URL of the Gumloop REST API.
        timeout: Request timeout in seconds. None disables the timeout.
        log_level: Level name applied to the package logger.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = Field(default=None, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def load_config(env_file: Optional[str] = None) -> GumloopConfig:
    """Build the configuration from the environment.

    A ``.env`` file found from the working directory upwards is loaded first. Values already present
    in the environment take precedence over the file.

    Args:
        env_file: Optional explicit path to a dotenv file.

    Returns:
        The frozen configuration.

    Raises:
        ConfigurationError: If the API key is missing or a setting is malformed.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        msg = f"{API_KEY_ENV} environment variable is required"
        logger.error(msg)
        raise ConfigurationError(msg)

    raw_timeout = os.getenv(TIMEOUT_ENV)
    try:
        timeout = float(raw_timeout) if raw_timeout else None
    except ValueError as e:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be a number of seconds, got '{raw_timeout}'") from e

    try:
        return GumloopConfig(
            api_key=api_key,
            base_url=(os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            log_level=(os.getenv(LOG_LEVEL_ENV) or "INFO").upper(),
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
