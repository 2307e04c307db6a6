"""Short URL expansion for tool arguments."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

SHORT_URL_PREFIX = "http://s@Url.a/"
SHORT_URL_RE = re.compile(re.escape(SHORT_URL_PREFIX) + r"\d+")


class ShortUrlResolver(Protocol):
    def real_url(self, scope_id: str, short_url: str) -> str | None:
        ...


@dataclass(frozen=True)
class StaticShortUrlResolver:
    """Resolver backed by a ``{scope_id: {short_url: real_url}}`` mapping."""

    mapping: dict[str, dict[str, str]] = field(default_factory=dict)

    def real_url(self, scope_id: str, short_url: str) -> str | None:
        return self.mapping.get(scope_id, {}).get(short_url)


def load_short_url_map(path: Path) -> StaticShortUrlResolver:
    if not path.exists():
        return StaticShortUrlResolver()
    raw = json.loads(path.read_text(encoding="utf-8"))
    mapping = {
        str(scope): {str(short): str(real) for short, real in urls.items()}
        for scope, urls in raw.items()
    }
    return StaticShortUrlResolver(mapping)


def expand_short_urls(
    text: str | None, scope_id: str, resolver: ShortUrlResolver | None
) -> str | None:
    if not text or not scope_id or resolver is None:
        return text

    def _replace(match: re.Match[str]) -> str:
        short_url = match.group(0)
        real_url = resolver.real_url(scope_id, short_url)
        if real_url is None:
            logger.warning("Short URL not found in mapping: %s", short_url)
            return short_url
        logger.debug("Replaced short URL %s with real URL %s", short_url, real_url)
        return real_url

    return SHORT_URL_RE.sub(_replace, text)
