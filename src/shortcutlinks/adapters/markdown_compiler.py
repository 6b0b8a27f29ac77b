"""Markdown to HTML compiler with an optional document transform step.

The compiler parses markdown with markdown-it-py into a ``SyntaxTreeNode``
tree, runs the transform over it and renders the result. Pages whose
transform reports issues fail as a whole with every message attached.

Typical site build step::

    compiler = all_shortcut_links_compiler()
    html = compiler.compile(page_source)

or with a custom mapping::

    compiler = shortcut_links_compiler([(["kowainik"], kowainik)])
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, ConfigDict, Field

from shortcutlinks.core.errors import ConfigError
from shortcutlinks.core.interfaces import DocumentCompilerPort, DocumentTransform, ShortcutMapping
from shortcutlinks.shortcuts.catalog import ALL_SHORTCUTS
from shortcutlinks.shortcuts.registry import ShortcutRegistry
from shortcutlinks.transform import apply_shortcuts

logger = logging.getLogger(__name__)


class ReaderOptions(BaseModel):
    """How markdown source is parsed."""

    model_config = ConfigDict(extra="forbid")

    preset: str = Field(default="commonmark", description="markdown-it preset name")
    enable: list[str] = Field(default_factory=list, description="Extra rules to enable")
    disable: list[str] = Field(default_factory=list, description="Rules to disable")
    html: bool | None = Field(default=None, description="Allow raw HTML in source")
    typographer: bool | None = Field(default=None, description="Smart quotes and replacements")
    options: dict[str, Any] = Field(
        default_factory=dict, description="Extra markdown-it options, e.g. maxNesting"
    )


class WriterOptions(BaseModel):
    """How the document tree is rendered to HTML."""

    model_config = ConfigDict(extra="forbid")

    xhtml_out: bool | None = Field(default=None, description="Self-close void tags")
    breaks: bool | None = Field(default=None, description="Render soft breaks as <br>")
    lang_prefix: str | None = Field(default=None, description="CSS class prefix for fenced code")


def build_markdown(reader: ReaderOptions, writer: WriterOptions) -> MarkdownIt:
    """Create a configured MarkdownIt instance.

    Raises:
        ConfigError: If the preset or a rule name is unknown.
    """
    options: dict[str, Any] = dict(reader.options)
    if reader.html is not None:
        options["html"] = reader.html
    if reader.typographer is not None:
        options["typographer"] = reader.typographer
    if writer.xhtml_out is not None:
        options["xhtmlOut"] = writer.xhtml_out
    if writer.breaks is not None:
        options["breaks"] = writer.breaks
    if writer.lang_prefix is not None:
        options["langPrefix"] = writer.lang_prefix

    try:
        md = MarkdownIt(reader.preset, options or None)
        if reader.enable:
            md.enable(reader.enable)
        if reader.disable:
            md.disable(reader.disable)
    except (KeyError, ValueError) as e:
        raise ConfigError(f"Invalid markdown reader options: {e}") from e
    return md


class MarkdownCompiler(DocumentCompilerPort):
    """Compiles markdown pages to HTML, applying a transform in between."""

    def __init__(
        self,
        reader: ReaderOptions | None = None,
        writer: WriterOptions | None = None,
        transform: DocumentTransform | None = None,
    ) -> None:
        self.reader = reader or ReaderOptions()
        self.writer = writer or WriterOptions()
        self.transform = transform
        self._md = build_markdown(self.reader, self.writer)

    def parse(self, source: str) -> SyntaxTreeNode:
        """Parse markdown into a syntax tree."""
        return SyntaxTreeNode(self._md.parse(source))

    def render(self, document: SyntaxTreeNode) -> str:
        """Render a syntax tree to HTML."""
        return self._md.renderer.render(document.to_tokens(), self._md.options, {})

    def compile(self, source: str) -> str:
        """Parse, transform and render one page.

        Raises:
            ShortcutResolutionError: If the transform found any issue.
        """
        document = self.parse(source)
        if self.transform is not None:
            document = self.transform(document).unwrap()
        return self.render(document)


def default_compiler(
    reader: ReaderOptions | None = None, writer: WriterOptions | None = None
) -> MarkdownCompiler:
    """Plain markdown compiler without any transform."""
    return MarkdownCompiler(reader, writer)


def shortcut_links_compiler(
    mapping: ShortcutMapping,
    reader: ReaderOptions | None = None,
    writer: WriterOptions | None = None,
) -> MarkdownCompiler:
    """Compiler that expands shortcut links with a custom mapping.

    Accepts the same reader/writer options as default_compiler(), so it can
    replace it in a build without other changes.
    """
    registry = mapping if isinstance(mapping, ShortcutRegistry) else ShortcutRegistry(mapping)
    logger.debug("Shortcut compiler with %d shortcut entries", len(registry))
    return MarkdownCompiler(reader, writer, transform=partial(apply_shortcuts, registry))


def all_shortcut_links_compiler(
    reader: ReaderOptions | None = None, writer: WriterOptions | None = None
) -> MarkdownCompiler:
    """Same as shortcut_links_compiler() with the built-in catalog."""
    return shortcut_links_compiler(ALL_SHORTCUTS, reader, writer)
