"""Locating oklch() literals inside larger documents."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .parser import OKLCH_RE

Span = Tuple[int, int]


class LiteralMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    literal: str
    start: int
    end: int

    @property
    def span(self) -> Span:
        return (self.start, self.end)

    def contains(self, offset: int) -> bool:
        """Both ends inclusive, so a caret right after the ')' still counts."""
        return self.start <= offset <= self.end


def scan_literals(text: str) -> List[LiteralMatch]:
    """Every oklch() literal in text, in document order."""
    return [
        LiteralMatch(literal=m.group(0), start=m.start(), end=m.end())
        for m in OKLCH_RE.finditer(text)
    ]


def literal_at(text: str, offset: int) -> Optional[LiteralMatch]:
    for match in scan_literals(text):
        if match.contains(offset):
            return match
    return None


def replace_span(text: str, span: Span, replacement: str) -> str:
    start, end = span
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Span {span} out of range for text of length {len(text)}")
    return text[:start] + replacement + text[end:]
