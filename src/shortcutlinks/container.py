"""Dependency injection container for shortcutlinks."""

from __future__ import annotations

from dataclasses import dataclass

from shortcutlinks.config import ShortcutLinksConfig
from shortcutlinks.core.interfaces import DocumentCompilerPort
from shortcutlinks.shortcuts.registry import ShortcutRegistry


@dataclass
class Container:
    """DI container holding the active mapping and compiler."""

    config: ShortcutLinksConfig
    registry: ShortcutRegistry
    compiler: DocumentCompilerPort

    @staticmethod
    def create_default(config: ShortcutLinksConfig) -> Container:
        """Create a container from configuration.

        Template shortcuts come first so they shadow built-ins sharing a name.
        """
        from shortcutlinks.adapters.markdown_compiler import shortcut_links_compiler
        from shortcutlinks.shortcuts.catalog import ALL_SHORTCUTS
        from shortcutlinks.shortcuts.templates import template_shortcut

        registry = ShortcutRegistry()
        for s in config.shortcuts:
            registry.register(s.names, template_shortcut(s.names[0], s.url, s.tag_url))
        if config.use_builtin:
            registry.extend(ALL_SHORTCUTS)

        compiler = shortcut_links_compiler(registry, config.reader, config.writer)

        return Container(config=config, registry=registry, compiler=compiler)

    @staticmethod
    def create_for_testing(
        config: ShortcutLinksConfig | None = None,
        registry: ShortcutRegistry | None = None,
        compiler: DocumentCompilerPort | None = None,
    ) -> Container:
        """Create a container with test doubles.

        All parameters are optional. The default compiler is a stub that
        raises if used without being replaced.
        """
        if config is None:
            config = ShortcutLinksConfig(use_builtin=False)

        class StubCompiler(DocumentCompilerPort):
            def parse(self, source: str) -> object:
                raise NotImplementedError("Provide a mock compiler")

            def render(self, document: object) -> str:
                raise NotImplementedError("Provide a mock compiler")

            def compile(self, source: str) -> str:
                raise NotImplementedError("Provide a mock compiler")

        return Container(
            config=config,
            registry=registry if registry is not None else ShortcutRegistry(),
            compiler=compiler or StubCompiler(),
        )
