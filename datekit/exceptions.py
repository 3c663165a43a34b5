"""Custom exceptions for datekit."""


class DatekitError(Exception):
    """Base exception class for all datekit errors."""

    def __init__(self, message: str | None = None, *args):
        """Initialize the DatekitError.

        Args:
            message: Optional error message.
            *args: Additional arguments to pass to the base
            Exception class.
        """
        self.message = message or self.__class__.__name__
        super().__init__(self.message, *args)


# Specific categories of exceptions


class ValidationError(DatekitError):
    """Exception raised for validation errors."""


class NullReferenceError(DatekitError):
    """Exception raised when a required object reference is None.

    Only raised when replacing the compiled formatter of a
    :class:`~datekit.services.formatter.DateFormatter`. Every other missing
    argument is reported as an :class:`InvalidInputError`.
    """


# Validation errors


class InvalidInputError(ValidationError):
    """Exception raised for invalid input data."""

    def __init__(
        self, input_value: object, message: str | None = None, *args: object
    ) -> None:
        """Initialize the InvalidInputError.

        Args:
            input_value: The invalid input value.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"Invalid input: {input_value}"
        super().__init__(message, *args)
        self.input_value = input_value


class PatternError(ValidationError):
    """Exception raised for malformed or unusable formatting patterns."""

    def __init__(
        self, pattern: object, cause: str, message: str | None = None, *args: object
    ) -> None:
        """Initialize the PatternError.

        Args:
            pattern: The offending pattern.
            cause: Description of what is wrong with the pattern.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"Invalid pattern '{pattern}': {cause}"
        super().__init__(message, *args)
        self.pattern = pattern
        self.cause = cause


class DateParseError(ValidationError):
    """Exception raised when text cannot be parsed using a pattern."""

    def __init__(
        self, input_value: str, pattern: str, message: str | None = None, *args: object
    ) -> None:
        """Initialize the DateParseError.

        Args:
            input_value: The text that failed to parse.
            pattern: The pattern used for parsing.
            message: Optional custom error message.
            *args: Additional arguments to pass to the base Exception class.
        """
        if message is None:
            message = f"Text '{input_value}' could not be parsed using '{pattern}'."
        super().__init__(message, *args)
        self.input_value = input_value
        self.pattern = pattern
