"""Exception hierarchy for DOS date/time conversion."""


class DosDateTimeError(Exception):
    """Base exception for DOS date/time conversion errors."""


class InvalidArgumentError(DosDateTimeError, ValueError):
    """Raised when a caller-supplied value fails a precondition.

    Keeps the offending field name, its value and the accepted inclusive
    range so callers can build their own messages.
    """

    def __init__(
        self,
        field: str,
        value: object,
        minimum: int | None = None,
        maximum: int | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            if minimum is not None and maximum is not None:
                message = (
                    f"Invalid {field} '{value}'. "
                    f"{field.capitalize()} must be between {minimum} and {maximum}"
                )
            else:
                message = f"Invalid {field} '{value}'"
        super().__init__(message)
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
