"""
Extractor configuration — engine feature flags and size limits.

Load order:
  1. Built-in defaults.
  2. JSON config file (if ``CONTACTS_CONFIG_FILE`` env var is set).
  3. Individual environment variable overrides (``CONTACTS_*`` prefix).
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Package version: bump on every pattern change
# ---------------------------------------------------------------------------
PACKAGE_VERSION = "0.2.0"


# ---------------------------------------------------------------------------
# ExtractorConfig
# ---------------------------------------------------------------------------


@dataclass
class ExtractorConfig:
    """All runtime-tunable parameters for contact extraction."""

    # --- Feature flags: engines ---
    engine_strict_email_enabled: bool = True
    """Whitespace-token strict email pass."""

    engine_link_scan_enabled: bool = True
    """Whole-text email link scan (recall safety net)."""

    engine_phone_enabled: bool = True

    max_text_length: int = 1_000_000
    """Hard cap on text length accepted by :func:`run_extraction`."""

    # ------------------------------------------------------------------
    # Factory helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Build config from environment variables, falling back to defaults."""
        cfg = cls()

        config_file = os.environ.get("CONTACTS_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                try:
                    raw = json.loads(path.read_text(encoding="utf-8"))
                    if not isinstance(raw, dict):
                        raise ValueError("top-level JSON value must be an object")
                    cfg = cls(**_coerce_file_values(raw))
                    logger.info("Loaded extractor config from %s", path)
                except (OSError, ValueError) as exc:
                    logger.warning("Failed to load config file %s: %s", path, exc)
            else:
                logger.warning("Config file %s does not exist; using defaults", path)

        _apply_env_overrides(cfg)
        return cfg

    @classmethod
    def default(cls) -> "ExtractorConfig":
        """Return a fresh config with all defaults (convenience alias)."""
        return cls()

    def feature_flags(self) -> Dict[str, bool]:
        return {
            "engine_strict_email": self.engine_strict_email_enabled,
            "engine_link_scan": self.engine_link_scan_enabled,
            "engine_phone": self.engine_phone_enabled,
        }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_BOOL_MAP = {"true": True, "1": True, "yes": True, "false": False, "0": False, "no": False}


def _coerce_file_values(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep the known fields of a config-file object, coerced to their field type.

    Flags accept JSON booleans or the same strings as the env overrides;
    integers accept JSON integers or numeric strings. Anything else is
    dropped with a warning so the default stays in force.
    """
    defaults = ExtractorConfig()
    values: Dict[str, Any] = {}
    for f in fields(ExtractorConfig):
        if f.name not in raw:
            continue
        v = raw[f.name]
        expected = type(getattr(defaults, f.name))
        coerced: Any = None
        if expected is bool:
            if isinstance(v, bool):
                coerced = v
            elif isinstance(v, str):
                coerced = _BOOL_MAP.get(v.strip().lower())
        elif expected is int:
            if isinstance(v, int) and not isinstance(v, bool):
                coerced = v
            elif isinstance(v, str):
                try:
                    coerced = int(v.strip())
                except ValueError:
                    coerced = None
        if coerced is None:
            logger.warning("Ignoring invalid config file value %r for %s", v, f.name)
            continue
        values[f.name] = coerced
    return values



def _apply_env_overrides(cfg: ExtractorConfig) -> None:
    """Apply individual CONTACTS_* environment variable overrides to *cfg* in-place."""
    def _getenv_int(key: str) -> Optional[int]:
        v = os.environ.get(key)
        if v is None:
            return None
        try:
            return int(v)
        except ValueError:
            logger.warning("Ignoring non-integer value %r for %s", v, key)
            return None

    def _getenv_bool(key: str) -> Optional[bool]:
        v = os.environ.get(key, "").lower()
        return _BOOL_MAP.get(v)

    val = _getenv_int("CONTACTS_MAX_TEXT_LENGTH")
    if val is not None:
        cfg.max_text_length = val

    for attr, env_key in [
        ("engine_strict_email_enabled", "CONTACTS_ENGINE_STRICT_EMAIL"),
        ("engine_link_scan_enabled", "CONTACTS_ENGINE_LINK_SCAN"),
        ("engine_phone_enabled", "CONTACTS_ENGINE_PHONE"),
    ]:
        flag = _getenv_bool(env_key)
        if flag is not None:
            setattr(cfg, attr, flag)
