"""Settings and shared constants."""

from formblocks.config.settings import (
    LOG_LEVEL,
    VERBOSE,
    DEFAULT_PHONE_COUNTRY,
    country_from_locale,
)
from formblocks.config.constants import (
    REQUIRED_MESSAGE,
    INVALID_PHONE_MESSAGE,
    SINGLE_FILE_MESSAGE,
    AT_LEAST_ONE_FILE_MESSAGE,
)

__all__ = [
    # Settings
    "LOG_LEVEL",
    "VERBOSE",
    "DEFAULT_PHONE_COUNTRY",
    "country_from_locale",
    # Constants
    "REQUIRED_MESSAGE",
    "INVALID_PHONE_MESSAGE",
    "SINGLE_FILE_MESSAGE",
    "AT_LEAST_ONE_FILE_MESSAGE",
]
