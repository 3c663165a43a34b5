"""Date validation and pattern based date formatting utilities."""

from datekit.core.validators import DateValidator
from datekit.services.formatter import DEFAULT_PATTERN, DateFormatter

__all__ = ["DEFAULT_PATTERN", "DateFormatter", "DateValidator"]
