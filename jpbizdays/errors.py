"""Custom exceptions."""

from typing import Any


class JapaneseBusinessDaysError(Exception):
    """Base exception for jpbizdays."""

    def __init__(
        self, message: str = "", *, parameter: str | None = None, value: Any = None
    ) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        """Structured form of the error, for logs and UIs."""
        return {
            "error_class": type(self).__name__,
            "message": str(self),
            "parameter": self.parameter,
            "value": repr(self.value),
        }


class InvalidArgumentError(JapaneseBusinessDaysError):
    """Raised when an argument has the wrong type or is out of range."""


class InvalidDateError(InvalidArgumentError):
    """Raised when a date-like value cannot be parsed into a date."""


class ComputationImpossibleError(JapaneseBusinessDaysError):
    """Raised when valid inputs combine into an infeasible request."""


class ConfigurationError(JapaneseBusinessDaysError):
    """Raised when configuration values are invalid."""


def suggestions_for(error: JapaneseBusinessDaysError) -> list[str]:
    """
    Build human-facing hints for an error.

    Only the presentation layers (CLI and TUI) call this; the core raises
    bare typed errors.
    """
    suggestions: list[str] = []

    if isinstance(error, InvalidDateError):
        suggestions.append("Use ISO format (YYYY-MM-DD) like '2024-01-01'")
        suggestions.append("Check for typos in the date string")
    elif isinstance(error, ComputationImpossibleError):
        suggestions.append("Check that the requested weekday occurrence exists in that month")
        suggestions.append("Keep date arithmetic within years 1 to 9999")
    elif isinstance(error, ConfigurationError):
        if error.parameter == "weekend_days":
            suggestions.append("Use integers 0-6 (0=Sunday, 6=Saturday), e.g. 0,6")
            suggestions.append("Leave at least one day of the week as a working day")
        else:
            suggestions.append("Use dates in YYYY-MM-DD format, separated by commas")
    elif isinstance(error, InvalidArgumentError):
        match error.parameter:
            case "days":
                suggestions.append("Use a positive or negative integer number of business days")
            case "year":
                suggestions.append("Use a 4-digit year between 1000 and 9999")
            case "date" | "start" | "end":
                suggestions.append("Pass a datetime.date, datetime.datetime or ISO date string")

        if error.value is None and error.parameter:
            suggestions.append(f"Provide a non-None value for {error.parameter}")

    return suggestions
