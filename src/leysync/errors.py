"""Errors raised while parsing raw payloads and formatting GOOD documents."""

from __future__ import annotations


class LeysyncError(ValueError):
    """Base class for all conversion errors."""


class InvalidPayloadError(LeysyncError):
    """Raised when a raw payload envelope reports a failed API call."""


class MissingFieldError(LeysyncError):
    """Raised when a required field is absent from a raw record."""

    def __init__(self, field: str, context: str = "") -> None:
        self.field = field
        self.context = context
        msg = f"missing required field '{field}'"
        if context:
            msg = f"{msg} in {context}"
        super().__init__(msg)


class UnmappedStatCode(LeysyncError):
    """Raised when a numeric property code has no GOOD stat key."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"unmapped stat code: {code!r}")


class InvalidSlotPosition(LeysyncError):
    """Raised when an artifact position is outside 1-5."""

    def __init__(self, position: object) -> None:
        self.position = position
        super().__init__(f"invalid artifact slot position: {position!r}")


class MalformedNumericString(LeysyncError):
    """Raised when a substat value string is not a number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"malformed numeric string: {value!r}")
