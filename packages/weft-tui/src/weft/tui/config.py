"""Render settings read from ``WEFT_*`` environment variables.

``WEFT_LAYOUT_CACHE_SIZE``
    Number of solved layouts kept in the LRU cache (default 500, ``0``
    disables memoization).
``WEFT_FORCE_FULL_REDRAW``
    ``"1"`` makes the frame driver re-send every cell each frame.
``WEFT_TUI_DEBUG_DIR``
    Directory that receives a trimmed ANSI dump of every completed frame.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_CACHE_SIZE = 500


def _parse_cache_size(raw: str | None) -> int:
    if raw is None or raw == "":
        return DEFAULT_LAYOUT_CACHE_SIZE
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid WEFT_LAYOUT_CACHE_SIZE=%r, using %d",
            raw,
            DEFAULT_LAYOUT_CACHE_SIZE,
        )
        return DEFAULT_LAYOUT_CACHE_SIZE
    if value < 0:
        logger.warning(
            "Ignoring negative WEFT_LAYOUT_CACHE_SIZE=%d, using %d",
            value,
            DEFAULT_LAYOUT_CACHE_SIZE,
        )
        return DEFAULT_LAYOUT_CACHE_SIZE
    return value


@dataclass(frozen=True)
class RenderSettings:
    """Tunables for layout memoization and the frame driver."""

    layout_cache_size: int = DEFAULT_LAYOUT_CACHE_SIZE
    force_full_redraw: bool = False
    debug_dir: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RenderSettings:
        env = os.environ if environ is None else environ
        return cls(
            layout_cache_size=_parse_cache_size(env.get("WEFT_LAYOUT_CACHE_SIZE")),
            force_full_redraw=env.get("WEFT_FORCE_FULL_REDRAW") == "1",
            debug_dir=env.get("WEFT_TUI_DEBUG_DIR") or None,
        )
