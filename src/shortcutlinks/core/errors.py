"""Error hierarchy for shortcutlinks."""

from __future__ import annotations


class ShortcutLinksError(Exception):
    """Base exception for all shortcutlinks errors."""

    pass


class ConfigError(ShortcutLinksError):
    """Configuration loading or validation error."""

    pass


class ShortcutResolutionError(ShortcutLinksError):
    """One or more shortcut links in a document could not be expanded.

    Carries every collected message so a single build reports all broken
    links of a page at once.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "shortcut resolution failed")
