"""Path-segment sanitization for tag values."""

import re

from loguru import logger

log = logger.bind(stage="sanitize")


def sanitize_component(value: str, fallback: str) -> str:
    """Make a tag value safe to use as a single path segment.

    Replaces path separators and reserved characters with underscores,
    strips leading/trailing dots and whitespace, collapses repeated
    underscores, and truncates to 255 bytes. Returns fallback when
    nothing usable is left.
    """
    sanitized = re.sub(r'[/\\:"*?<>|\x00-\x1f]+', "_", value)
    sanitized = sanitized.strip(" .")
    sanitized = re.sub(r"__+", "_", sanitized)

    if len(sanitized.encode("utf-8")) > 255:
        while len(sanitized.encode("utf-8")) > 255 and sanitized:
            sanitized = sanitized[:-1]

    if not sanitized:
        log.debug(f"sanitize_component({value!r}) left nothing, using {fallback!r}")
        return fallback

    if sanitized != value:
        log.debug(f"Sanitized {value!r} -> {sanitized!r}")
    return sanitized
