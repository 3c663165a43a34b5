"""Application state shared by CLI commands."""

from dataclasses import dataclass, field

from datekit.core.validators import DateValidator
from datekit.services.formatter import DEFAULT_PATTERN, DateFormatter


@dataclass
class AppState:
    """State for the application."""

    debug: bool = False
    no_color: bool = False
    validator: DateValidator = field(default_factory=DateValidator)

    def get_date_formatter(self, pattern: str = DEFAULT_PATTERN) -> DateFormatter:
        """Create a DateFormatter for the given pattern."""
        return DateFormatter(self.validator, pattern)
