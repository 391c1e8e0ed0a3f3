from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import structlog
from flask import current_app

log = structlog.get_logger()

EXTENSION_KEY = "sound_catalog"


@dataclass(frozen=True)
class AppSettings:
    """
    Immutable runtime settings, built once by the application factory
    from the Flask config and shared read-only by every request.
    """
    port: int
    host: str
    music_dir: Path
    description_dir: Path
    cover_dir: Path

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "AppSettings":
        """Build settings from a Flask config mapping. Relative paths resolve against the CWD."""
        settings = cls(
            port=int(cfg.get("PORT", 3000)),
            host=cfg.get("HOST", "0.0.0.0"),
            music_dir=Path(cfg["MUSIC_DIR"]).resolve(),
            description_dir=Path(cfg["DESCRIPTION_DIR"]).resolve(),
            cover_dir=Path(cfg["COVER_DIR"]).resolve(),
        )
        log.info(
            "settings.loaded",
            port=settings.port,
            music_dir=str(settings.music_dir),
            description_dir=str(settings.description_dir),
            cover_dir=str(settings.cover_dir),
        )
        return settings


def get_settings() -> AppSettings:
    """Return the settings of the active application."""
    return current_app.extensions[EXTENSION_KEY]
