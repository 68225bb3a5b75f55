"""
Host capability interface.

An editor (or any other document owner) supplies a ColorHost; the core calls
into it to find literals, paint swatches and apply edits. Re-scan throttling
on document changes is the host's job.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from .errors import ParseError
from .formats import TargetFormat, convert, to_rgb
from .parser import parse
from .scanner import LiteralMatch, Span, replace_span, scan_literals

logger = logging.getLogger(__name__)


class ColorHost(Protocol):
    def scan_literals(self, text: str) -> Sequence[LiteralMatch]: ...

    def apply_replacement(self, span: Span, text: str) -> None: ...

    def render_swatch(self, span: Span, color: str) -> None: ...


def decorate(host: ColorHost, text: str) -> int:
    """Render an RGB swatch for every parseable literal; returns how many."""
    rendered = 0
    for match in host.scan_literals(text):
        try:
            color = parse(match.literal)
        except ParseError as exc:
            logger.debug("Skipping literal at %d: %s", match.start, exc)
            continue
        if color is None:
            continue
        host.render_swatch(match.span, to_rgb(color))
        rendered += 1
    return rendered


def convert_at(host: ColorHost, text: str, offset: int, target: TargetFormat = "rgb") -> Optional[str]:
    """Replace the literal under offset with its target notation."""
    for match in host.scan_literals(text):
        if not match.contains(offset):
            continue
        color = parse(match.literal)
        if color is None:
            return None
        replacement = convert(color, target)
        host.apply_replacement(match.span, replacement)
        return replacement
    return None


class BufferHost:
    """In-memory host over a plain string."""

    def __init__(self, text: str = ""):
        self.text = text
        self.swatches: List[Tuple[Span, str]] = []

    def scan_literals(self, text: str) -> List[LiteralMatch]:
        return scan_literals(text)

    def apply_replacement(self, span: Span, text: str) -> None:
        self.text = replace_span(self.text, span, text)

    def render_swatch(self, span: Span, color: str) -> None:
        self.swatches.append((span, color))
