"""URL-template shortcuts declared in configuration.

A template is a URL with ``{text}`` and ``{tag}`` placeholders, e.g.
``https://kowainik.github.io/posts/{text}``. Placeholder values are
percent-encoded, keeping ``/`` so paths can be passed through.
"""

from __future__ import annotations

from string import Formatter
from urllib.parse import quote

from shortcutlinks.core.interfaces import Resolver
from shortcutlinks.core.models import ShortcutResult

PLACEHOLDERS = frozenset({"text", "tag"})


def template_fields(template: str) -> set[str]:
    """Return the placeholder names used in a template.

    Raises:
        ValueError: If the template is malformed or uses positional fields.
    """
    fields = set()
    for _, field, _, _ in Formatter().parse(template):
        if field is None:
            continue
        if not field:
            raise ValueError(f"Positional placeholder in template: {template!r}")
        fields.add(field)
    return fields


def validate_template(template: str, *, allow_tag: bool = True) -> str:
    """Check a template only uses known placeholders."""
    fields = template_fields(template)
    allowed = PLACEHOLDERS if allow_tag else PLACEHOLDERS - {"tag"}
    unknown = fields - allowed
    if unknown:
        names = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown placeholder(s) {names} in template: {template!r}")
    return template


def template_shortcut(name: str, url: str, tag_url: str | None = None) -> Resolver:
    """Build a resolver from URL templates.

    Args:
        name: Shortcut name, used in messages.
        url: Template used when no tag was given. Must not use ``{tag}``.
        tag_url: Template used when a tag was given. When omitted, tags
            are rejected.

    Returns:
        A resolver producing the formatted URL.
    """
    validate_template(url, allow_tag=False)
    if tag_url is not None:
        validate_template(tag_url)

    def resolve(tag: str | None, text: str) -> ShortcutResult:
        if tag is None:
            return ShortcutResult.success(url.format(text=quote(text)))
        if tag_url is None:
            return ShortcutResult.failure(f"{name}: shortcut does not take an option, got {tag!r}")
        return ShortcutResult.success(tag_url.format(text=quote(text), tag=quote(tag)))

    resolve.__doc__ = f"Template shortcut {name!r}: {url}"
    return resolve
