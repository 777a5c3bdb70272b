"""
Writer settings with JSON persistence.

Only what affects the produced files lives here. Unknown keys in a settings
file are ignored and bad values fall back to the defaults.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)


@dataclass
class WriterSettings:
    """All user-configurable writer settings."""

    # zlib level for ARGB → PNG conversion.
    # 0 = no compression (fastest, largest), 9 = smallest, -1 = zlib default.
    compression_level: int = 0

    def save(self, path: str) -> None:
        """Write settings to path, replacing the file atomically."""
        tmp = path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(asdict(self), f, indent=2, ensure_ascii=False)
            os.replace(tmp, path)
        except Exception:
            try:
                os.remove(tmp)
            except OSError:
                pass
            raise

    @classmethod
    def load(cls, path: str) -> "WriterSettings":
        """Load settings from JSON, returning defaults for missing keys."""
        settings = cls()
        if not os.path.exists(path):
            return settings
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"SETTINGS: could not read {path}: {e}")
            return settings
        if not isinstance(data, dict):
            return settings

        # Only set known fields, ignore unknown keys
        for key, value in data.items():
            if hasattr(settings, key):
                expected_type = type(getattr(settings, key))
                if isinstance(value, expected_type) and not isinstance(value, bool):
                    setattr(settings, key, value)

        level = settings.compression_level
        if level != -1 and not 0 <= level <= 9:
            logger.warning(f"SETTINGS: ignoring invalid compression_level {level}")
            settings.compression_level = cls.compression_level
        return settings
