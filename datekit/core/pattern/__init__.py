"""Letter based date patterns such as ``d MMM uuuu``."""

from datekit.core.pattern.formatter import PatternFormatter

__all__ = ["PatternFormatter"]
