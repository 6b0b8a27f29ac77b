"""Integration test: compiling a small site with shortcut links."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from shortcutlinks.config import load_config
from shortcutlinks.container import Container
from shortcutlinks.core.errors import ShortcutResolutionError

POST = """\
# Style guide

We publish our [style guide](@kowainik(2019-02-06-style-guide)) and
the [hakyll-shortcut-links](@github:kowainik) library, built on
[pandoc](@hackage) and documented on [Wikipedia](@wiki:en).

Plain links like [this one](https://example.com "Example") stay as they are.
"""

BROKEN_POST = """\
- [one](@nope)
- [two *words*](@github)
- [three](@wiki:xx-YY)
- [four](@github(a)(b))
"""


@pytest.fixture()
def site_container(tmp_path: Path) -> Container:
    """Container built from a config file like a site author would write."""
    config_file = tmp_path / "shortcutlinks.yaml"
    config_file.write_text(
        yaml.dump(
            {
                "shortcuts": [
                    {"names": ["kowainik"], "url": "https://kowainik.github.io/posts/{text}"}
                ],
                "writer": {"xhtml_out": False},
            }
        )
    )
    return Container.create_default(load_config(str(config_file)))


class TestSiteBuild:
    """Tests for a full page build."""

    def test_page_compiles_with_every_link_expanded(self, site_container: Container) -> None:
        html = site_container.compiler.compile(POST)

        assert 'href="https://kowainik.github.io/posts/2019-02-06-style-guide"' in html
        assert 'href="https://github.com/kowainik/hakyll-shortcut-links"' in html
        assert 'href="https://hackage.haskell.org/package/pandoc"' in html
        assert 'href="https://en.wikipedia.org/wiki/Wikipedia"' in html
        assert '<a href="https://example.com" title="Example">this one</a>' in html
        assert "@" not in html

    def test_broken_page_reports_every_problem(self, site_container: Container) -> None:
        with pytest.raises(ShortcutResolutionError) as exc_info:
            site_container.compiler.compile(BROKEN_POST)

        assert exc_info.value.messages == [
            "unknown shortcut name: 'nope'",
            "Shortcut title is not a single string element",
            "wikipedia: unknown language code 'xx-YY'",
            "multiple parenthesized groups in shortcut",
        ]
