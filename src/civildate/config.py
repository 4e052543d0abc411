"""Configuration utilities for civildate.

This module centralizes small helpers and constants related to runtime
configuration, all of it sourced from environment variables.
"""

import os
from datetime import timezone, tzinfo

from civildate.domain.calendar import resolve_zone

TZ_ENV_VAR = "CIVILDATE_TZ"  # pragma: no mutate
LOGGER_LEVELS_ENV_VAR = "CIVILDATE_LOGGER_LEVELS"  # pragma: no mutate


def get_default_zone() -> tzinfo:
    """Get the default timezone for "now" commands from the environment.

    Returns:
        The zone named by `CIVILDATE_TZ`, or UTC when it is unset or empty.

    Raises:
        TimezoneNotFoundError: If `CIVILDATE_TZ` names an unknown zone.
    """
    if not (name := os.environ.get(TZ_ENV_VAR, "").strip()):
        return timezone.utc
    return resolve_zone(name)
