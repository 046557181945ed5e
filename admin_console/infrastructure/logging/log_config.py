"""Log levels for the console's own loggers and the HTTP stack underneath.

Host applications call ``setup_logging()`` once; the levels come from the
``ADMIN_CONSOLE_LOG_LEVEL*`` settings.
"""

import logging
import sys

from admin_console.config import Settings, get_settings

# Settings field -> loggers it governs
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_client": ("admin_console.infrastructure.http",),
    "log_level_controller": ("admin_console.application.services",),
}

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    levels = {
        field: _parse_level(getattr(settings, field)) for field in _CATEGORY_MAP
    }
    for field, names in _CATEGORY_MAP.items():
        for name in names:
            logging.getLogger(name).setLevel(levels[field])

    logging.getLogger(__name__).debug(
        "Log levels: %s",
        ", ".join(f"{f}={logging.getLevelName(lvl)}" for f, lvl in levels.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name to ``logging`` constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
