"""Shortcutlinks: expand ``@name:tag`` shortcut links in markdown documents."""

__version__ = "0.1.0"

from shortcutlinks.adapters.markdown_compiler import (  # noqa: E402
    MarkdownCompiler,
    ReaderOptions,
    WriterOptions,
    all_shortcut_links_compiler,
    default_compiler,
    shortcut_links_compiler,
)
from shortcutlinks.core.errors import ShortcutResolutionError  # noqa: E402
from shortcutlinks.core.models import RewriteOutcome, ShortcutResult  # noqa: E402
from shortcutlinks.core.parser import parse_shortcut  # noqa: E402
from shortcutlinks.shortcuts.catalog import ALL_SHORTCUTS  # noqa: E402
from shortcutlinks.shortcuts.registry import ShortcutRegistry, use_shortcut_from  # noqa: E402
from shortcutlinks.transform import apply_all_shortcuts, apply_shortcuts  # noqa: E402

__all__ = [
    "ALL_SHORTCUTS",
    "MarkdownCompiler",
    "ReaderOptions",
    "RewriteOutcome",
    "ShortcutRegistry",
    "ShortcutResolutionError",
    "ShortcutResult",
    "WriterOptions",
    "all_shortcut_links_compiler",
    "apply_all_shortcuts",
    "apply_shortcuts",
    "default_compiler",
    "parse_shortcut",
    "shortcut_links_compiler",
    "use_shortcut_from",
]
