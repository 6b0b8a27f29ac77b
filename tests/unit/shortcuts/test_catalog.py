"""Tests for the built-in shortcut catalog."""

from __future__ import annotations

import pytest

from shortcutlinks.core.models import ResultStatus
from shortcutlinks.shortcuts import catalog
from shortcutlinks.shortcuts.catalog import ALL_SHORTCUTS
from shortcutlinks.shortcuts.registry import ShortcutRegistry


@pytest.fixture()
def registry() -> ShortcutRegistry:
    """Registry over the full catalog."""
    return ShortcutRegistry(ALL_SHORTCUTS)


class TestCatalogTable:
    """Tests for the ALL_SHORTCUTS table itself."""

    def test_names_are_unique(self) -> None:
        names = [name for aliases, _ in ALL_SHORTCUTS for name in aliases]
        assert len(names) == len(set(names))

    def test_every_entry_is_callable(self) -> None:
        for aliases, resolver in ALL_SHORTCUTS:
            assert aliases
            assert callable(resolver)

    @pytest.mark.parametrize("name", ["github", "gh", "wiki", "pypi", "hk", "ddg", "so", "yt"])
    def test_common_aliases_present(self, registry: ShortcutRegistry, name: str) -> None:
        assert registry.lookup(name) is not None


class TestExpectedUrls:
    """Resolved URLs of representative shortcuts."""

    @pytest.mark.parametrize(
        ("name", "tag", "text", "url"),
        [
            ("github", None, "kowainik", "https://github.com/kowainik"),
            ("gh", None, "@kowainik", "https://github.com/kowainik"),
            ("github", "kowainik", "hakyll-shortcut-links", "https://github.com/kowainik/hakyll-shortcut-links"),
            ("gitlab", "group", "project", "https://gitlab.com/group/project"),
            ("bb", None, "atlassian", "https://bitbucket.org/atlassian"),
            ("twitter", None, "@kowainik", "https://twitter.com/kowainik"),
            ("telegram", None, "kowainik", "https://t.me/kowainik"),
            ("fb", None, "someone", "https://www.facebook.com/someone"),
            ("reddit", None, "r/haskell", "https://www.reddit.com/r/haskell"),
            ("reddit", "u", "spez", "https://www.reddit.com/user/spez"),
            ("pypi", None, "requests", "https://pypi.org/project/requests/"),
            ("pypi", "2.31.0", "requests", "https://pypi.org/project/requests/2.31.0/"),
            ("npm", None, "react", "https://www.npmjs.com/package/react"),
            ("crate", "1.0.0", "serde", "https://crates.io/crates/serde/1.0.0"),
            ("gem", None, "rails", "https://rubygems.org/gems/rails"),
            ("hackage", None, "relude", "https://hackage.haskell.org/package/relude"),
            ("hk", "1.2.0.0", "relude", "https://hackage.haskell.org/package/relude-1.2.0.0"),
            ("stackage", None, "relude", "https://www.stackage.org/lts/package/relude"),
            ("stackage", "nightly", "relude", "https://www.stackage.org/nightly/package/relude"),
            ("choco", None, "git", "https://community.chocolatey.org/packages/git"),
            ("docker", None, "python", "https://hub.docker.com/_/python"),
            ("docker", None, "bitnami/redis", "https://hub.docker.com/r/bitnami/redis"),
            ("google", None, "shortcut links", "https://www.google.com/search?q=shortcut+links"),
            ("ddg", None, "a&b", "https://duckduckgo.com/?q=a%26b"),
            ("hoogle", None, "map", "https://hoogle.haskell.org/?hoogle=map"),
            ("wiki", None, "Haskell", "https://en.wikipedia.org/wiki/Haskell"),
            ("wiki", "de", "Grüne Soße", "https://de.wikipedia.org/wiki/Gr%C3%BCne_So%C3%9Fe"),
            ("so", None, "11227809", "https://stackoverflow.com/questions/11227809"),
            ("so", "a", "11227902", "https://stackoverflow.com/a/11227902"),
            ("yt", None, "dQw4w9WgXcQ", "https://www.youtube.com/watch?v=dQw4w9WgXcQ"),
            ("yt", "playlist", "PL123", "https://www.youtube.com/playlist?list=PL123"),
            ("rfc", None, "RFC 2616", "https://www.rfc-editor.org/rfc/rfc2616"),
            ("pep", None, "8", "https://peps.python.org/pep-0008/"),
        ],
    )
    def test_success(
        self, registry: ShortcutRegistry, name: str, tag: str | None, text: str, url: str
    ) -> None:
        result = registry.resolve(name, tag, text)
        assert result.status == ResultStatus.SUCCESS
        assert result.url == url


class TestFailuresAndWarnings:
    """Inputs a resolver refuses or only half accepts."""

    def test_empty_owner_tag_fails(self) -> None:
        result = catalog.github("", "repo")
        assert result.status == ResultStatus.FAILURE
        assert "empty owner" in result.messages[0]

    def test_empty_text_fails(self) -> None:
        assert catalog.pypi(None, "").status == ResultStatus.FAILURE

    def test_non_numeric_question_fails(self) -> None:
        result = catalog.stackoverflow(None, "abc")
        assert result.status == ResultStatus.FAILURE

    def test_unknown_option_fails(self) -> None:
        assert catalog.youtube("shorts", "x").status == ResultStatus.FAILURE
        assert catalog.reddit("x", "y").status == ResultStatus.FAILURE

    def test_wikipedia_odd_language_warns_with_url(self) -> None:
        result = catalog.wikipedia("Klingon", "Qapla")
        assert result.status == ResultStatus.WARNING
        assert result.url == "https://Klingon.wikipedia.org/wiki/Qapla"
        assert "unknown language code" in result.messages[0]

    def test_wikipedia_empty_language_fails(self) -> None:
        assert catalog.wikipedia("", "Haskell").status == ResultStatus.FAILURE

    def test_tag_on_tagless_shortcut_warns(self) -> None:
        result = catalog.twitter("x", "kowainik")
        assert result.status == ResultStatus.WARNING
        assert result.url == "https://twitter.com/kowainik"
