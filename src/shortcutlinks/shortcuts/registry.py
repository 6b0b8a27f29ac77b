"""Shortcut registry: routes shortcut names to resolver functions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from shortcutlinks.core.interfaces import Resolver, ShortcutMapping
from shortcutlinks.core.models import ShortcutResult

logger = logging.getLogger(__name__)


def unknown_name_message(name: str) -> str:
    """Message reported for a name no entry answers to."""
    return f"unknown shortcut name: {name!r}"


class ShortcutRegistry:
    """Ordered table of (aliases, resolver) entries.

    Lookup walks the entries in registration order and the first entry whose
    aliases contain the name wins, so a name may appear in several entries
    and earlier ones shadow later ones.
    """

    def __init__(self, entries: ShortcutMapping | None = None) -> None:
        self._entries: list[tuple[frozenset[str], Resolver]] = []
        if entries is not None:
            self.extend(entries)

    def register(self, aliases: Iterable[str], resolver: Resolver) -> None:
        """Append an entry answering to every name in aliases."""
        names = frozenset(aliases)
        if not names:
            raise ValueError("A shortcut entry needs at least one name")
        self._entries.append((names, resolver))

    def extend(self, entries: ShortcutMapping) -> None:
        """Append entries, keeping their order."""
        if isinstance(entries, ShortcutRegistry):
            self._entries.extend(entries._entries)
            return
        for aliases, resolver in entries:
            self.register(aliases, resolver)

    def lookup(self, name: str) -> Resolver | None:
        """Find the resolver of the first entry answering to name."""
        for aliases, resolver in self._entries:
            if name in aliases:
                return resolver
        return None

    def resolve(self, name: str, tag: str | None, text: str) -> ShortcutResult:
        """Resolve name with the given tag and display text.

        Unknown names come back as a FAILURE result, like any other
        resolver failure.
        """
        resolver = self.lookup(name)
        if resolver is None:
            logger.debug("No shortcut named %r among %d entries", name, len(self))
            return ShortcutResult.failure(unknown_name_message(name))
        return resolver(tag, text)

    @property
    def names(self) -> list[list[str]]:
        """Alias sets of all entries, each sorted, in registration order."""
        return [sorted(aliases) for aliases, _ in self._entries]

    def __iter__(self) -> Iterator[tuple[frozenset[str], Resolver]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def use_shortcut_from(
    mapping: ShortcutMapping, name: str, tag: str | None, text: str
) -> ShortcutResult:
    """Resolve a shortcut against a mapping without keeping a registry around."""
    registry = mapping if isinstance(mapping, ShortcutRegistry) else ShortcutRegistry(mapping)
    return registry.resolve(name, tag, text)
