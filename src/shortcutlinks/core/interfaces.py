"""Port interfaces for shortcutlinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from shortcutlinks.core.models import RewriteOutcome, ShortcutResult

# (tag, display text) -> result. tag is None when no ':' was given.
Resolver: TypeAlias = Callable[[str | None, str], ShortcutResult]

# Ordered (aliases, resolver) pairs; earlier entries shadow later ones.
ShortcutMapping: TypeAlias = Iterable[tuple[Iterable[str], Resolver]]

# Document transform applied between parsing and rendering.
DocumentTransform: TypeAlias = Callable[[Any], RewriteOutcome]


class DocumentCompilerPort(ABC):
    """Port for a build-pipeline step that turns markup source into output."""

    @abstractmethod
    def parse(self, source: str) -> Any:
        """Parse markup source into a document tree.

        Args:
            source: Raw markup text.

        Returns:
            The document tree.
        """

    @abstractmethod
    def render(self, document: Any) -> str:
        """Render a document tree into the output format.

        Args:
            document: Tree previously returned by parse().

        Returns:
            Rendered output.
        """

    @abstractmethod
    def compile(self, source: str) -> str:
        """Parse, transform and render a page.

        Args:
            source: Raw markup text.

        Returns:
            Rendered output.

        Raises:
            ShortcutResolutionError: If the transform reported any issue.
        """
