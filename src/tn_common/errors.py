"""Unified error codes and custom exceptions.

Error code ranges:
  6xxx: Tracking number generation
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 6xxx: Tracking number generation ---

class InvalidConfigurationError(AppError):
    """Generator identity, bit layout or country table rejected. Raised at construction only."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            6001,
            f"Invalid {field}: {value!r} (must be {expected})",
            500,
        )


class ClockRegressionError(AppError):
    """Clock reported a time earlier than the last generated timestamp."""

    def __init__(self, current_ms: int, last_ms: int) -> None:
        self.current_ms = current_ms
        self.last_ms = last_ms
        super().__init__(
            6002,
            f"Clock moved backwards: now={current_ms}ms < last={last_ms}ms "
            f"({last_ms - current_ms}ms). Refusing to generate id",
            503,
        )

