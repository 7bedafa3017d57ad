"""Loader configuration loaded from environment variables.

All configuration values have sensible defaults so that a data source
can be constructed without any environment at all.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range.  This catches bad configuration at startup
    rather than on the first ``load_url`` call.

``GeoJsonDataSource`` never reads the environment itself; it defaults to
``LoaderConfig()``.  Applications call ``from_env()`` once at startup and
pass the result in::

    config = LoaderConfig.from_env()
    source = GeoJsonDataSource(config=config)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geojson_scene import __version__
from geojson_scene.core.exceptions import GeoJsonSceneError

_TRUE_LITERALS = frozenset({"1", "true", "yes", "on"})
_FALSE_LITERALS = frozenset({"0", "false", "no", "off"})

DEFAULT_FETCH_TIMEOUT_S = 30.0
DEFAULT_USER_AGENT = f"geojson-scene/{__version__}"


class ConfigValidationError(GeoJsonSceneError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable loader configuration.

    Attributes:
        fetch_timeout_s: Total timeout in seconds for fetching a GeoJSON URL.
        fetch_follow_redirects: Whether HTTP redirects are followed.
        fetch_user_agent: ``User-Agent`` header sent with fetch requests.
    """

    fetch_timeout_s: float = DEFAULT_FETCH_TIMEOUT_S
    fetch_follow_redirects: bool = True
    fetch_user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> LoaderConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range, a boolean
                literal is not recognised, or a string value is empty.
            ValueError: If ``GEOJSON_FETCH_TIMEOUT_S`` is not a number.
        """
        config = cls(
            fetch_timeout_s=float(
                os.getenv("GEOJSON_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S))
            ),
            fetch_follow_redirects=_parse_bool(
                "GEOJSON_FETCH_FOLLOW_REDIRECTS",
                os.getenv("GEOJSON_FETCH_FOLLOW_REDIRECTS", "true"),
            ),
            fetch_user_agent=os.getenv("GEOJSON_FETCH_USER_AGENT", DEFAULT_USER_AGENT),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean literal (true/false)")


def _validate(config: LoaderConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.fetch_timeout_s <= 0:
        raise ConfigValidationError(
            "GEOJSON_FETCH_TIMEOUT_S",
            config.fetch_timeout_s,
            "must be > 0 (seconds)",
        )

    if not config.fetch_user_agent.strip():
        raise ConfigValidationError(
            "GEOJSON_FETCH_USER_AGENT",
            config.fetch_user_agent,
            "must not be empty",
        )
