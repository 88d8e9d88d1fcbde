"""
Client settings for the employee directory endpoint.

Settings come from an optional JSON file. A missing or unreadable file, or
individual invalid values, fall back to the built-in defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://run.mocky.io/v3/"
DEFAULT_ENDPOINT_PATH = "51508676-f32f-48d8-8742-f74c526ee62c"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """
    Where and how to fetch the employee list.

    Attributes
    ----------
    base_url:
        Scheme and host (plus optional path prefix) of the API, ending in "/".
    endpoint_path:
        Path of the employee list resource relative to `base_url`.
    timeout_seconds:
        Transport timeout applied to the single GET request.
    """

    base_url: str
    endpoint_path: str
    timeout_seconds: float

    @staticmethod
    def defaults() -> "ClientSettings":
        return ClientSettings(
            base_url=DEFAULT_BASE_URL,
            endpoint_path=DEFAULT_ENDPOINT_PATH,
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        )

    @property
    def url(self) -> str:
        """Absolute URL of the employee list resource."""
        return self.base_url.rstrip("/") + "/" + self.endpoint_path.lstrip("/")


def load_client_settings(path: Path | None) -> ClientSettings:
    """
    Load client settings from a JSON file.

    Parameters
    ----------
    path:
        Settings file. If None, defaults are returned without touching disk.

    Returns
    -------
    ClientSettings
        Loaded settings, or defaults if missing/unreadable.
    """
    defaults = ClientSettings.defaults()
    if path is None:
        return defaults

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("Settings file %s not found; using defaults", path)
        return defaults
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings file %s: %s", path, exc)
        return defaults

    if not isinstance(payload, dict):
        logger.warning("Settings file %s does not hold a JSON object; using defaults", path)
        return defaults

    def _text(key: str, fallback: str) -> str:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        if value is not None:
            logger.warning("Ignoring invalid %s in %s", key, path)
        return fallback

    timeout = payload.get("timeout_seconds", defaults.timeout_seconds)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        logger.warning("Ignoring invalid timeout_seconds in %s", path)
        timeout = defaults.timeout_seconds

    return ClientSettings(
        base_url=_text("base_url", defaults.base_url),
        endpoint_path=_text("endpoint_path", defaults.endpoint_path),
        timeout_seconds=float(timeout),
    )
