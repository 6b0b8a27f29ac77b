"""Built-in shortcut resolvers.

Every resolver takes the optional tag (the part after ``:``) and the display
text, and returns a ShortcutResult. ``ALL_SHORTCUTS`` pairs each resolver with
the names it answers to::

    [user](@github)                 -> https://github.com/user
    [repo](@github:user)            -> https://github.com/user/repo
    [Haskell](@wiki)                -> https://en.wikipedia.org/wiki/Haskell
    [Haskell](@wiki:de)             -> https://de.wikipedia.org/wiki/Haskell
    [requests](@pypi)               -> https://pypi.org/project/requests/
"""

from __future__ import annotations

import re
from collections.abc import Callable
from urllib.parse import quote, quote_plus

from shortcutlinks.core.interfaces import Resolver
from shortcutlinks.core.models import ShortcutResult

_LANGUAGE_CODE = re.compile(r"^[a-z]{2,3}(?:-[a-z]+)?$")
_DIGITS = re.compile(r"^\d+$")


def _strip_at(text: str) -> str:
    return text[1:] if text.startswith("@") else text


def _tagless(site: str, tag: str | None, url: str) -> ShortcutResult:
    """Succeed with url, or warn when the shortcut was given a tag it ignores."""
    if tag is None:
        return ShortcutResult.success(url)
    return ShortcutResult.warning([f"{site}: shortcut does not take an option, got {tag!r}"], url)


def _empty_text(site: str) -> ShortcutResult:
    return ShortcutResult.failure(f"{site}: empty link text")


# Social


def facebook(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Facebook page or profile."""
    if not text:
        return _empty_text("facebook")
    return _tagless("facebook", tag, f"https://www.facebook.com/{quote(_strip_at(text))}")


def twitter(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Twitter account; a leading ``@`` is dropped."""
    if not text:
        return _empty_text("twitter")
    return _tagless("twitter", tag, f"https://twitter.com/{quote(_strip_at(text))}")


def telegram(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Telegram user or channel."""
    if not text:
        return _empty_text("telegram")
    return _tagless("telegram", tag, f"https://t.me/{quote(_strip_at(text))}")


def reddit(tag: str | None, text: str) -> ShortcutResult:
    """Link to a subreddit, or to a user with the ``u`` tag.

    ``r/haskell`` and ``/r/haskell`` are accepted as well as ``haskell``.
    """
    name = re.sub(r"^/?[ru]/", "", text)
    if not name:
        return _empty_text("reddit")
    if tag is None or tag == "r":
        return ShortcutResult.success(f"https://www.reddit.com/r/{quote(name)}")
    if tag in ("u", "user"):
        return ShortcutResult.success(f"https://www.reddit.com/user/{quote(name)}")
    return ShortcutResult.failure(f"reddit: unknown option {tag!r} (expected 'r' or 'u')")


# Code hosting


def _code_host(site: str, base: str) -> Resolver:
    def resolve(tag: str | None, text: str) -> ShortcutResult:
        if not text:
            return _empty_text(site)
        if tag is None:
            return ShortcutResult.success(f"{base}/{_strip_at(text)}")
        if not tag:
            return ShortcutResult.failure(f"{site}: empty owner in option")
        return ShortcutResult.success(f"{base}/{_strip_at(tag)}/{text}")

    resolve.__doc__ = f"Link to a {site} user, or to a repository with the owner as tag."
    return resolve


github = _code_host("github", "https://github.com")
gitlab = _code_host("gitlab", "https://gitlab.com")
bitbucket = _code_host("bitbucket", "https://bitbucket.org")


# Package indexes


def _package_index(
    site: str, url: Callable[[str], str], versioned: Callable[[str, str], str] | None = None
) -> Resolver:
    def resolve(tag: str | None, text: str) -> ShortcutResult:
        if not text:
            return _empty_text(site)
        package = quote(text)
        if tag is None:
            return ShortcutResult.success(url(package))
        if versioned is None:
            return _tagless(site, tag, url(package))
        if not tag:
            return ShortcutResult.failure(f"{site}: empty version in option")
        return ShortcutResult.success(versioned(package, quote(tag)))

    resolve.__doc__ = f"Link to a package on {site}; the tag, if any, is a version."
    return resolve


pypi = _package_index(
    "pypi",
    lambda p: f"https://pypi.org/project/{p}/",
    lambda p, v: f"https://pypi.org/project/{p}/{v}/",
)
npm = _package_index(
    "npm",
    lambda p: f"https://www.npmjs.com/package/{p}",
    lambda p, v: f"https://www.npmjs.com/package/{p}/v/{v}",
)
crates = _package_index(
    "crates",
    lambda p: f"https://crates.io/crates/{p}",
    lambda p, v: f"https://crates.io/crates/{p}/{v}",
)
rubygems = _package_index(
    "rubygems",
    lambda p: f"https://rubygems.org/gems/{p}",
    lambda p, v: f"https://rubygems.org/gems/{p}/versions/{v}",
)
hackage = _package_index(
    "hackage",
    lambda p: f"https://hackage.haskell.org/package/{p}",
    lambda p, v: f"https://hackage.haskell.org/package/{p}-{v}",
)
chocolatey = _package_index(
    "chocolatey",
    lambda p: f"https://community.chocolatey.org/packages/{p}",
    lambda p, v: f"https://community.chocolatey.org/packages/{p}/{v}",
)


def stackage(tag: str | None, text: str) -> ShortcutResult:
    """Link to a package in a Stackage snapshot (``lts`` unless tagged)."""
    if not text:
        return _empty_text("stackage")
    if tag == "":
        return ShortcutResult.failure("stackage: empty snapshot in option")
    snapshot = tag or "lts"
    return ShortcutResult.success(f"https://www.stackage.org/{quote(snapshot)}/package/{quote(text)}")


def docker(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Docker Hub image; names without a namespace are official images."""
    if not text:
        return _empty_text("docker")
    if "/" in text:
        url = f"https://hub.docker.com/r/{text}"
    else:
        url = f"https://hub.docker.com/_/{quote(text)}"
    return _tagless("docker", tag, url)


# Search


def _search(site: str, base: str) -> Resolver:
    def resolve(tag: str | None, text: str) -> ShortcutResult:
        if not text:
            return _empty_text(site)
        return _tagless(site, tag, base + quote_plus(text))

    resolve.__doc__ = f"Link to a {site} search for the display text."
    return resolve


google = _search("google", "https://www.google.com/search?q=")
duckduckgo = _search("duckduckgo", "https://duckduckgo.com/?q=")
hoogle = _search("hoogle", "https://hoogle.haskell.org/?hoogle=")


# References


def wikipedia(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Wikipedia article; the tag selects the language edition.

    An unusual language code still produces a URL but is reported as a
    warning.
    """
    if not text:
        return _empty_text("wikipedia")
    if tag == "":
        return ShortcutResult.failure("wikipedia: empty language in option")
    language = tag or "en"
    title = quote(text.strip().replace(" ", "_"), safe="()_,:'!")
    url = f"https://{language}.wikipedia.org/wiki/{title}"
    if not _LANGUAGE_CODE.match(language):
        return ShortcutResult.warning([f"wikipedia: unknown language code {language!r}"], url)
    return ShortcutResult.success(url)


def stackoverflow(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Stack Overflow question, or an answer with the ``a`` tag."""
    if not _DIGITS.match(text):
        return ShortcutResult.failure(f"stackoverflow: expected a numeric id, got {text!r}")
    if tag is None or tag == "q":
        return ShortcutResult.success(f"https://stackoverflow.com/questions/{text}")
    if tag == "a":
        return ShortcutResult.success(f"https://stackoverflow.com/a/{text}")
    return ShortcutResult.failure(f"stackoverflow: unknown option {tag!r} (expected 'q' or 'a')")


def youtube(tag: str | None, text: str) -> ShortcutResult:
    """Link to a YouTube video, or a channel/playlist/user by tag."""
    if not text:
        return _empty_text("youtube")
    ident = quote(text)
    if tag is None or tag == "video":
        return ShortcutResult.success(f"https://www.youtube.com/watch?v={ident}")
    if tag == "channel":
        return ShortcutResult.success(f"https://www.youtube.com/channel/{ident}")
    if tag == "playlist":
        return ShortcutResult.success(f"https://www.youtube.com/playlist?list={ident}")
    if tag == "user":
        return ShortcutResult.success(f"https://www.youtube.com/@{quote(_strip_at(text))}")
    return ShortcutResult.failure(f"youtube: unknown option {tag!r}")


def rfc(tag: str | None, text: str) -> ShortcutResult:
    """Link to an IETF RFC; ``RFC 2616`` and ``2616`` are both accepted."""
    number = re.sub(r"^rfc\s*", "", text.strip(), flags=re.IGNORECASE)
    if not _DIGITS.match(number):
        return ShortcutResult.failure(f"rfc: expected an RFC number, got {text!r}")
    return _tagless("rfc", tag, f"https://www.rfc-editor.org/rfc/rfc{int(number)}")


def pep(tag: str | None, text: str) -> ShortcutResult:
    """Link to a Python Enhancement Proposal."""
    number = re.sub(r"^pep\s*", "", text.strip(), flags=re.IGNORECASE)
    if not _DIGITS.match(number):
        return ShortcutResult.failure(f"pep: expected a PEP number, got {text!r}")
    return _tagless("pep", tag, f"https://peps.python.org/pep-{int(number):04d}/")


ALL_SHORTCUTS: tuple[tuple[tuple[str, ...], Resolver], ...] = (
    (("facebook", "fb"), facebook),
    (("twitter",), twitter),
    (("telegram",), telegram),
    (("reddit",), reddit),
    (("github", "gh"), github),
    (("gitlab", "gl"), gitlab),
    (("bitbucket", "bb"), bitbucket),
    (("pypi",), pypi),
    (("npm",), npm),
    (("crates", "crate"), crates),
    (("rubygems", "gem"), rubygems),
    (("hackage", "hk"), hackage),
    (("stackage",), stackage),
    (("chocolatey", "choco"), chocolatey),
    (("docker", "dockerhub"), docker),
    (("google", "g"), google),
    (("duckduckgo", "ddg"), duckduckgo),
    (("hoogle",), hoogle),
    (("wikipedia", "wiki"), wikipedia),
    (("stackoverflow", "so"), stackoverflow),
    (("youtube", "yt"), youtube),
    (("rfc",), rfc),
    (("pep",), pep),
)
