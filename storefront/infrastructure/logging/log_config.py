"""Logging setup for the customer controllers and their persistence layer.

SQL statement logging, the controller audit trail and the manager debug
output each get their own level from Settings.
"""

import logging
import sys

from storefront.config import Settings, get_settings

# Settings field -> logger names it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_controller": ("storefront.application.controllers",),
    "log_level_persistence": ("storefront.infrastructure.database",),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root and per-category levels; call once at startup."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
        root.addHandler(handler)

    levels = {}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        levels[settings_field.removeprefix("log_level_")] = logging.getLevelName(level)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Logging configured: root=%s %s", settings.log_level, levels)


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
