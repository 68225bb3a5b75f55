"""Exceptions raised by the OKLCH core."""


class ParseError(ValueError):
    """A literal matched the oklch() pattern but a token is not a number."""

    def __init__(self, token: str, literal: str):
        self.token = token
        self.literal = literal
        super().__init__(f"Malformed number {token!r} in {literal!r}")
