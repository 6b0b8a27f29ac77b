"""Shared test fixtures for shortcutlinks."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from shortcutlinks.core.models import ShortcutResult


def parse_markdown(source: str) -> SyntaxTreeNode:
    """Parse markdown the way the default compiler does."""
    return SyntaxTreeNode(MarkdownIt("commonmark").parse(source))


def make_link_document(href: str, children: list[Token], title: str | None = None) -> SyntaxTreeNode:
    """Build a one-paragraph document holding a single link with given children."""
    attrs = {"href": href}
    if title is not None:
        attrs["title"] = title
    inline = Token(
        "inline",
        "",
        0,
        children=[Token("link_open", "a", 1, attrs=attrs), *children, Token("link_close", "a", -1)],
    )
    return SyntaxTreeNode(
        [Token("paragraph_open", "p", 1), inline, Token("paragraph_close", "p", -1)]
    )


def links(document: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Collect link nodes in reading order."""
    found = []

    def walk(node: SyntaxTreeNode) -> None:
        for child in node.children:
            if child.type == "link":
                found.append(child)
            walk(child)

    walk(document)
    return found


def kowainik(tag: str | None, text: str) -> ShortcutResult:
    """Custom shortcut pointing to blog posts."""
    return ShortcutResult.success(f"https://kowainik.github.io/posts/{text}")


def fake_github(tag: str | None, text: str) -> ShortcutResult:
    """GitHub shortcut that only looks at the tag."""
    return ShortcutResult.success(f"https://github.com/{tag}")


def always_fails(tag: str | None, text: str) -> ShortcutResult:
    """Shortcut that reports a failure naming its input."""
    return ShortcutResult.failure(f"cannot resolve {text}")


def always_warns(tag: str | None, text: str) -> ShortcutResult:
    """Shortcut that returns a URL with two warnings."""
    return ShortcutResult.warning(["first caveat", "second caveat"], "https://example.com/partial")


@pytest.fixture()
def test_mapping() -> list:
    """Small custom mapping used across tests."""
    return [
        (["kowainik", "kw"], kowainik),
        (["github", "gh"], fake_github),
        (["broken"], always_fails),
        (["shaky"], always_warns),
    ]


@pytest.fixture()
def parse_md():
    """Factory parsing markdown source into a syntax tree."""
    return parse_markdown


@pytest.fixture()
def link_document():
    """Factory building a single-link document from raw inline tokens."""
    return make_link_document


@pytest.fixture()
def find_links():
    """Function collecting link nodes in reading order."""
    return links
