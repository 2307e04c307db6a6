"""Per-call scope shared by every file operation."""

from __future__ import annotations

from dataclasses import dataclass

from planfs.core.settings import DEFAULT_SUPPORTED_EXTENSIONS, Settings
from planfs.sandbox.roots import RootKind
from planfs.services.short_url import ShortUrlResolver, expand_short_urls


@dataclass(frozen=True)
class OperationContext:
    scope_id: str
    root_kind: RootKind = RootKind.WORKSPACE
    supported_extensions: frozenset[str] = DEFAULT_SUPPORTED_EXTENSIONS
    short_urls: ShortUrlResolver | None = None
    expand_short_urls: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        scope_id: str,
        root_kind: RootKind,
        short_urls: ShortUrlResolver | None = None,
    ) -> OperationContext:
        return cls(
            scope_id=scope_id,
            root_kind=root_kind,
            supported_extensions=settings.supported_extensions,
            short_urls=short_urls,
            expand_short_urls=settings.enable_short_url,
        )

    def expand(self, text: str | None) -> str | None:
        if not self.expand_short_urls:
            return text
        return expand_short_urls(text, self.scope_id, self.short_urls)
