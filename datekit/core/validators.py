"""Validators for user input."""

import re

_DATE_REGEX = re.compile(
    r"(0[1-9]|1[012])[- /.](0[1-9]|[12][0-9]|3[01])[- /.](19|20)\d\d", re.ASCII
)


class DateValidator:
    """Lexical validator for ``MM-DD-YYYY`` style date strings.

    The separators may be ``-``, a space, ``/`` or ``.``, and they are not
    required to match each other. No calendar checks are made, so values such
    as ``02-31-2020`` are accepted.
    """

    def is_date_valid(self, value: str | None) -> bool:
        """Return True if the whole string matches the expected date layout."""
        if not isinstance(value, str) or not value:
            return False
        return _DATE_REGEX.fullmatch(value) is not None
