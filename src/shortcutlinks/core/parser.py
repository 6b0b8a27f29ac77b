"""Parser for shortcut link targets.

A shortcut target looks like ``@name[:tag][(text)]``::

    @github                      -> name="github"
    @github:kowainik             -> name="github", tag="kowainik"
    @wiki:                       -> name="wiki", tag=""
    @kowainik(2019-02-06-guide)  -> name="kowainik", text="2019-02-06-guide"

Anything not starting with ``@`` is an ordinary link and is reported as
NO_MATCH rather than as an error.
"""

from __future__ import annotations

from shortcutlinks.core.models import ParseOutcome, ShortcutReference

SHORTCUT_PREFIX = "@"


class _Scanner:
    """Single-pass cursor over a target string."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def advance(self) -> None:
        self.pos += 1

    def take_until(self, stops: str) -> str:
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] not in stops:
            self.pos += 1
        return self.source[start : self.pos]

    def rest(self) -> str:
        return self.source[self.pos :]


class _SyntaxError(Exception):
    pass


def parse_shortcut(target: str) -> ParseOutcome:
    """Classify a link target and extract its shortcut fields.

    Args:
        target: Raw link target (the URL part of a markdown link).

    Returns:
        ParseOutcome that is NO_MATCH, ERROR (with a message) or PARSED
        (with a ShortcutReference). Never raises.
    """
    if not target.startswith(SHORTCUT_PREFIX):
        return ParseOutcome.no_match()

    scanner = _Scanner(target)
    scanner.advance()
    try:
        reference = _parse_reference(scanner)
    except _SyntaxError as e:
        return ParseOutcome.failed(str(e))
    return ParseOutcome.parsed(reference)


def _parse_reference(scanner: _Scanner) -> ShortcutReference:
    name = scanner.take_until(":()")
    if not name:
        raise _SyntaxError("empty shortcut name")

    tag: str | None = None
    if scanner.peek() == ":":
        scanner.advance()
        tag = scanner.take_until("()")

    text: str | None = None
    if scanner.peek() == "(":
        scanner.advance()
        text = _parse_text(scanner)

    _expect_end(scanner)
    return ShortcutReference(name=name, tag=tag, text=text)


def _parse_text(scanner: _Scanner) -> str:
    text = scanner.take_until(")")
    if scanner.peek() is None:
        raise _SyntaxError(f"unclosed '(' in shortcut text: {text!r}")
    scanner.advance()
    return text


def _expect_end(scanner: _Scanner) -> None:
    char = scanner.peek()
    if char is None:
        return
    if char == ")":
        raise _SyntaxError("unbalanced ')' in shortcut")
    if char == "(":
        raise _SyntaxError("multiple parenthesized groups in shortcut")
    raise _SyntaxError(f"unexpected text after ')' in shortcut: {scanner.rest()!r}")
