"""Expand shortcut links in parsed documents.

Walks every link node of a markdown-it-py syntax tree, parses its target as
``@name[:tag][(text)]`` and replaces it with the URL produced by the matching
resolver. Problems are collected across the whole document instead of
stopping at the first one, and the rewrites are only committed when there
were none.
"""

from __future__ import annotations

import logging
from typing import Any

import mdurl

from shortcutlinks.core.interfaces import ShortcutMapping
from shortcutlinks.core.models import (
    ErrorKind,
    ParseStatus,
    ResultStatus,
    RewriteOutcome,
    ShortcutIssue,
)
from shortcutlinks.core.parser import parse_shortcut
from shortcutlinks.shortcuts.catalog import ALL_SHORTCUTS
from shortcutlinks.shortcuts.registry import ShortcutRegistry, unknown_name_message
from shortcutlinks.tree import TreeVisitor

logger = logging.getLogger(__name__)

EMPTY_TITLE_MESSAGE = "Empty shortcut link title arguments"
NOT_SINGLE_STRING_MESSAGE = "Shortcut title is not a single string element"


def link_target(node: Any) -> str:
    """Return the decoded href of a link node."""
    href = node.attrs.get("href", "")
    return mdurl.decode(str(href))


def set_link_target(node: Any, url: str) -> None:
    """Replace the href of a link node, leaving its title alone."""
    token = node.token or node.nester_tokens.opening
    token.attrSet("href", url)


class _LinkRewriter(TreeVisitor):
    """Resolves shortcut links and stages their new targets."""

    node_type = "link"

    def __init__(self, registry: ShortcutRegistry) -> None:
        super().__init__()
        self._registry = registry
        self.issues: list[ShortcutIssue] = []
        self.rewrites: list[tuple[Any, str]] = []

    def visit(self, node: Any) -> None:
        target = link_target(node)
        outcome = parse_shortcut(target)

        if outcome.status is ParseStatus.NO_MATCH:
            return
        if outcome.status is ParseStatus.ERROR:
            self._record(ErrorKind.MALFORMED_SYNTAX, outcome.error or "", target)
            return

        reference = outcome.reference
        if reference is None:
            return
        text = reference.text
        if text is None:
            text = self._inline_text(node, target)
            if text is None:
                return

        resolver = self._registry.lookup(reference.name)
        if resolver is None:
            self._record(ErrorKind.UNKNOWN_NAME, unknown_name_message(reference.name), target)
            return

        result = resolver(reference.tag, text)
        if result.status is ResultStatus.SUCCESS and result.url is not None:
            logger.debug("Expanded %s -> %s", target, result.url)
            self.rewrites.append((node, result.url))
            return
        if result.status is ResultStatus.SUCCESS:
            self._record(ErrorKind.RESOLVER_FAILURE, f"{reference.name}: no URL produced", target)
            return
        # WARNING and FAILURE both fail the link; a warning's URL is dropped
        if not result.messages:
            message = f"{reference.name}: resolver returned {result.status.value} without a message"
            self._record(ErrorKind.RESOLVER_FAILURE, message, target)
            return
        for message in result.messages:
            self._record(ErrorKind.RESOLVER_FAILURE, message, target)

    def _inline_text(self, node: Any, target: str) -> str | None:
        children = node.children
        if not children:
            self._record(ErrorKind.INVALID_DISPLAY_TEXT, EMPTY_TITLE_MESSAGE, target)
            return None
        if len(children) == 1 and children[0].type == "text":
            return children[0].content
        self._record(ErrorKind.INVALID_DISPLAY_TEXT, NOT_SINGLE_STRING_MESSAGE, target)
        return None

    def _record(self, kind: ErrorKind, message: str, target: str) -> None:
        logger.debug("Shortcut link %s: %s", target, message)
        self.issues.append(ShortcutIssue(kind=kind, message=message, target=target))

    def commit(self) -> None:
        for node, url in self.rewrites:
            set_link_target(node, url)


def apply_shortcuts(mapping: ShortcutMapping, document: Any) -> RewriteOutcome:
    """Expand every shortcut link in a document using the given mapping.

    If you want to add a couple of shortcuts on top of the built-in ones,
    put them first so they shadow built-ins with the same name::

        apply_shortcuts([(["hk", "hackage"], my_hackage), *ALL_SHORTCUTS], doc)

    Args:
        mapping: Ordered (aliases, resolver) pairs or a ShortcutRegistry.
        document: markdown-it-py SyntaxTreeNode. Link targets are rewritten
            in place, and only when every shortcut resolved.

    Returns:
        RewriteOutcome holding the document, or every issue found in it.
    """
    registry = mapping if isinstance(mapping, ShortcutRegistry) else ShortcutRegistry(mapping)
    rewriter = _LinkRewriter(registry)
    rewriter.run(document)

    if rewriter.issues:
        logger.debug("%d shortcut issue(s) found, document left unchanged", len(rewriter.issues))
        return RewriteOutcome(issues=rewriter.issues)

    rewriter.commit()
    return RewriteOutcome(document=document)


def apply_all_shortcuts(document: Any) -> RewriteOutcome:
    """Same as apply_shortcuts() with the built-in catalog."""
    return apply_shortcuts(ALL_SHORTCUTS, document)
