"""Configuration loader for snakebrain.

Settings come from a YAML file, by default ``snakebrain/configs/default.yaml``
which ships inside the package, and are then overridden from the
environment. Environment keys use the SNAKEBRAIN_ prefix and double
underscores between section and field:

    SNAKEBRAIN_STRATEGY__PERSONALITY=snacky
    SNAKEBRAIN_SERVER__PORT=9000
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from snakebrain.core.decision import DecisionConfig
from snakebrain.models.behavior import HazardPolicy, Personality, TieBreak

logger = logging.getLogger(__name__)

ENV_PREFIX = "SNAKEBRAIN_"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


class StrategyConfig(BaseModel):
    """How the snake picks its moves."""

    personality: Personality = Field(
        default=Personality.HEADHUNTER, description="Behavioral archetype"
    )
    tie_break: TieBreak = Field(
        default=TieBreak.SMALLEST_OPPONENT, description="Second key when ranking prey"
    )
    hazard_policy: HazardPolicy = Field(
        default=HazardPolicy.IGNORE, description="Whether hazards block the search"
    )
    fallback_enabled: bool = Field(
        default=True, description="Answer decision failures with a safe move"
    )


class AppearanceConfig(BaseModel):
    """What the info endpoint reports to the game server."""

    author: str = Field(default="")
    color: str = Field(default="#888888", pattern="^#[0-9a-fA-F]{6}$")
    head: str = Field(default="default")
    tail: str = Field(default="default")
    version: str = Field(default="0.1.0")


class ServerConfig(BaseModel):
    """Where the webhook server listens."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Process-wide logging."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="readable", pattern="^(readable|json)$")


class Config(BaseModel):
    """All snakebrain settings."""

    strategy: StrategyConfig = Field(default_factory=StrategyConfig)
    appearance: AppearanceConfig = Field(default_factory=AppearanceConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def decision_config(self) -> DecisionConfig:
        """Build the decision engine configuration from the strategy section."""
        strategy = self.strategy
        return DecisionConfig(
            personality=strategy.personality,
            tie_break=strategy.tie_break,
            hazard_policy=strategy.hazard_policy,
            fallback_enabled=strategy.fallback_enabled,
        )


def _coerce(raw: str, like: Any) -> Any:
    """Convert an environment string to the type of the default it replaces."""
    if isinstance(like, bool):
        return raw.strip().lower() in _TRUE_WORDS
    if isinstance(like, int):
        return int(raw)
    if isinstance(like, float):
        return float(raw)
    return raw


def _env_overrides(
    data: Mapping[str, Any],
    defaults: Mapping[str, Any],
    path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Overlay SNAKEBRAIN_* variables on ``data``.

    The walk follows the shape of the defaults, so a field can be set from
    the environment even when the YAML file never mentions it.
    """
    merged = dict(data)
    for key, default in defaults.items():
        field_path = (*path, key)
        if isinstance(default, dict):
            section = merged.get(key)
            merged[key] = _env_overrides(
                section if isinstance(section, dict) else {}, default, field_path
            )
            continue

        env_name = ENV_PREFIX + "__".join(field_path).upper()
        raw = os.environ.get(env_name)
        if raw is not None:
            logger.debug("Config override from %s", env_name)
            merged[key] = _coerce(raw, default)
    return merged


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        data = yaml.safe_load(f)
    return data or {}


def load_config(config_path: str | Path | None = None) -> Config:
    """Load settings from YAML, then apply environment overrides.

    Args:
        config_path: YAML file to read. The packaged default if None.

    Returns:
        Validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValidationError: If a value is out of range or unknown.
    """
    path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = _env_overrides(_read_yaml(path), Config().model_dump(mode="json"))
    config = Config.model_validate(data)
    logger.debug("Loaded config from %s", path)
    return config


def get_default_config() -> Config:
    """Get the built-in defaults without reading any file."""
    return Config()


def _merge(base: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``updates`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in updates.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


ConfigListener = Callable[[Config], None]


class ConfigManager:
    """Holds the live configuration and tells listeners when it changes.

    The web app registers a listener that rebuilds its decision engine, so a
    strategy change applies from the next ``/move`` on.

    Example:
        >>> manager = ConfigManager(load_config())
        >>> manager.subscribe(lambda c: print(c.strategy.personality))
        >>> manager.update({"strategy": {"personality": "snacky"}})
        snacky
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._listeners: list[ConfigListener] = []

    @property
    def config(self) -> Config:
        """Get the live configuration."""
        return self._config

    def subscribe(self, listener: ConfigListener) -> None:
        """Call ``listener`` with the new configuration after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ConfigListener) -> None:
        """Stop notifying ``listener``. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def update(self, updates: Mapping[str, Any]) -> Config:
        """Apply a partial, possibly nested, update.

        The merged result is validated before it replaces the live
        configuration; an invalid update leaves everything unchanged.

        Raises:
            ValidationError: If the merged configuration is invalid.
        """
        candidate = Config.model_validate(_merge(self._config.model_dump(), updates))
        self._replace(candidate)
        return candidate

    def reset(self) -> Config:
        """Go back to the built-in defaults."""
        self._replace(Config())
        return self._config

    def _replace(self, config: Config) -> None:
        self._config = config
        for listener in list(self._listeners):
            try:
                listener(config)
            except Exception as e:
                logger.warning("Config listener %r failed: %s", listener, e)
