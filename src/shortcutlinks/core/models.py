"""Domain models for shortcutlinks."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shortcutlinks.core.errors import ShortcutResolutionError

# Characters that delimit the parts of a shortcut target
NAME_DELIMITERS = frozenset(":()")


class ShortcutReference(BaseModel):
    """A parsed shortcut target: ``@name[:tag][(text)]``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Shortcut name to look up")
    tag: str | None = Field(default=None, description="Option after ':' (may be empty)")
    text: str | None = Field(default=None, description="Explicit display text in parentheses")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty and free of grammar delimiters."""
        if not v:
            raise ValueError("Shortcut name must not be empty")
        if NAME_DELIMITERS.intersection(v):
            raise ValueError(f"Invalid shortcut name: {v!r}")
        return v

    def render(self) -> str:
        """Format the reference back into link-target syntax."""
        target = f"@{self.name}"
        if self.tag is not None:
            target += f":{self.tag}"
        if self.text is not None:
            target += f"({self.text})"
        return target


class ParseStatus(str, Enum):
    """Classification of a link target by the shortcut parser."""

    NO_MATCH = "no_match"
    ERROR = "error"
    PARSED = "parsed"


class ParseOutcome(BaseModel):
    """Result of parsing a single link target."""

    status: ParseStatus = Field(description="Parse classification")
    reference: ShortcutReference | None = Field(default=None, description="Set when PARSED")
    error: str | None = Field(default=None, description="Set when ERROR")

    @classmethod
    def no_match(cls) -> ParseOutcome:
        return cls(status=ParseStatus.NO_MATCH)

    @classmethod
    def failed(cls, error: str) -> ParseOutcome:
        return cls(status=ParseStatus.ERROR, error=error)

    @classmethod
    def parsed(cls, reference: ShortcutReference) -> ParseOutcome:
        return cls(status=ParseStatus.PARSED, reference=reference)


class ResultStatus(str, Enum):
    """Outcome of a single resolver invocation."""

    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


class ShortcutResult(BaseModel):
    """What a resolver produced for a tag and display text."""

    model_config = ConfigDict(frozen=True)

    status: ResultStatus = Field(description="Resolution outcome")
    url: str | None = Field(default=None, description="Resolved URL (best effort on WARNING)")
    messages: list[str] = Field(default_factory=list, description="Failure or warning messages")

    @classmethod
    def success(cls, url: str) -> ShortcutResult:
        return cls(status=ResultStatus.SUCCESS, url=url)

    @classmethod
    def warning(cls, messages: list[str], url: str) -> ShortcutResult:
        return cls(status=ResultStatus.WARNING, url=url, messages=list(messages))

    @classmethod
    def failure(cls, message: str) -> ShortcutResult:
        return cls(status=ResultStatus.FAILURE, messages=[message])


class ErrorKind(str, Enum):
    """Kinds of problems found while expanding shortcut links."""

    MALFORMED_SYNTAX = "malformed_syntax"
    INVALID_DISPLAY_TEXT = "invalid_display_text"
    UNKNOWN_NAME = "unknown_name"
    RESOLVER_FAILURE = "resolver_failure"


class ShortcutIssue(BaseModel):
    """A single problem recorded for a link node."""

    kind: ErrorKind = Field(description="Problem category")
    message: str = Field(description="Human-readable message")
    target: str = Field(description="Original link target")


class RewriteOutcome(BaseModel):
    """Either a fully rewritten document or every issue found in it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    document: Any = Field(default=None, description="Rewritten document, None on failure")
    issues: list[ShortcutIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no issues were recorded."""
        return not self.issues

    @property
    def errors(self) -> list[str]:
        """Messages of all issues in document order."""
        return [issue.message for issue in self.issues]

    def unwrap(self) -> Any:
        """Return the document, or raise with every collected message."""
        if self.issues:
            raise ShortcutResolutionError(self.errors)
        return self.document
