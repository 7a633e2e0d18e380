from __future__ import annotations
import logging
import os
import sys

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "minischeme> "
DEFAULT_LOG_LEVEL = logging.WARNING
# Each procedure call costs several Python frames
DEFAULT_RECURSION_LIMIT = 20_000


def get_prompt() -> str:
    return os.environ.get("MINISCHEME_PROMPT", DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    """Recursion limit from MINISCHEME_RECURSION_LIMIT, or the default."""
    raw = os.environ.get("MINISCHEME_RECURSION_LIMIT")
    if not raw or not raw.strip():
        return DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring MINISCHEME_RECURSION_LIMIT=%r: not an integer", raw)
        return DEFAULT_RECURSION_LIMIT
    if limit <= 0:
        logger.warning("Ignoring MINISCHEME_RECURSION_LIMIT=%r: must be positive", raw)
        return DEFAULT_RECURSION_LIMIT
    return limit


def ensure_recursion_limit() -> int:
    """Raise Python's recursion limit to the configured one; never lowers it."""
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        logger.debug("Raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)
    return sys.getrecursionlimit()


def get_log_level() -> int:
    name = os.environ.get("LOGLEVEL", "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = getattr(logging, name, None)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
