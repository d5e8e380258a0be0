"""
Error sink and analytics events.

Both are active only in the production profile. Elsewhere they leave a
DEBUG note so local runs stay quiet.
"""

from typing import Any, Dict, Optional, Union

from wispio.utils.logging import get_logger

ERROR_LOGGER_NAME = "wispio.telemetry"
ANALYTICS_LOGGER_NAME = "wispio.analytics"


class Telemetry:
    """Records service-level errors and analytics events."""

    def __init__(self, production: bool, level: Optional[Union[int, str]] = None):
        self.production = production
        self._errors = get_logger(ERROR_LOGGER_NAME, level)
        self._analytics = get_logger(ANALYTICS_LOGGER_NAME, level)

    def log_error(self, error: Union[BaseException, str]) -> None:
        if not self.production:
            self._errors.debug(f"Error logging is disabled outside production: {error}")
            return
        kind = getattr(getattr(error, "kind", None), "value", None)
        if kind:
            self._errors.error(f"An error occurred at Wispio service level [{kind}]: {error}")
        else:
            self._errors.error(f"An error occurred at Wispio service level: {error}")

    def analytics(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        if not self.production:
            self._analytics.debug("Analytics are disabled in development mode")
            return
        self._analytics.info(event, extra={"event": event, "payload": dict(payload or {})})

