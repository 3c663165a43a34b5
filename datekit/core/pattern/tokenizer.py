"""Module for tokenizing date patterns."""

from datekit.core.pattern import tokens
from datekit.exceptions import PatternError


class PatternLexer:
    """Class to split a date pattern into literal and field tokens."""

    def __init__(self, pattern: str):
        """Initialize with the pattern string."""
        self.text = pattern
        self.position = 0
        self.read_position = 0
        self.read_char()

    def read_char(self) -> None:
        """Read the next character and advance the position."""
        if self.read_position >= len(self.text):
            self.chr = ""
        else:
            self.chr = self.text[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def peek(self) -> str:
        """Peek at the next character without advancing the position."""
        return (
            self.text[self.read_position] if self.read_position < len(self.text) else ""
        )

    def read_run(self) -> int:
        """Read a run of the current letter and return its length."""
        start_position = self.position
        while self.peek() == self.chr:
            self.read_char()
        return self.read_position - start_position

    def read_quoted(self) -> str:
        """Read a quoted literal, the current character being the opening quote.

        Two consecutive quotes inside the literal stand for a single quote.
        """
        chars = []
        while True:
            self.read_char()
            match self.chr:
                case "":
                    raise PatternError(self.text, "unterminated quoted literal")
                case "'" if self.peek() == "'":
                    self.read_char()
                    chars.append("'")
                case "'":
                    return "".join(chars)
                case c:
                    chars.append(c)

    def __iter__(self):
        """Return the iterator object."""
        while (token := self.next_token()) and not isinstance(token, tokens.End):
            yield token
        yield token

    def next_token(self) -> tokens.Token:
        """Return the next token from the pattern."""
        tok: tokens.Token
        match self.chr:
            case "":
                tok = tokens.End()
            case "'" if self.peek() == "'":
                self.read_char()
                tok = tokens.Literal(text="'")
            case "'":
                tok = tokens.Literal(text=self.read_quoted())
            case t if t.isascii() and t.isalpha():
                try:
                    letter = tokens.Letter(t)
                except ValueError:
                    raise PatternError(
                        self.text, f"unknown pattern letter '{t}'"
                    ) from None
                width = self.read_run()
                if width > tokens.MAX_WIDTH[letter]:
                    raise PatternError(self.text, f"too many pattern letters '{t}'")
                tok = tokens.Field(letter=letter, width=width)
            case t:
                tok = tokens.Literal(text=t)

        self.read_char()
        return tok
