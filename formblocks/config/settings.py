"""
Global settings loaded from environment variables.

All settings have sensible defaults so the library works out of the box.
Override via environment variables.
"""

import os
from typing import Optional

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")


# =============================================================================
# Locale
# =============================================================================
def country_from_locale(locale: Optional[str]) -> Optional[str]:
    """
    Extract the region part of a locale tag.

    "en_AU.UTF-8" -> "AU", "en-US" -> "US", "C" -> None
    """
    if not locale:
        return None
    tag = locale.split(".")[0].split("@")[0].replace("-", "_")
    parts = tag.split("_")
    if len(parts) < 2 or not parts[1].isalpha() or len(parts[1]) != 2:
        return None
    return parts[1].upper()


# Used to resolve phone numbers entered without a country code.
# Callers pass this into the validators explicitly.
DEFAULT_PHONE_COUNTRY = (
    os.getenv("DEFAULT_PHONE_COUNTRY") or country_from_locale(os.getenv("LANG"))
)
