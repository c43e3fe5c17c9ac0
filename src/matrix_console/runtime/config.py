"""Runtime configuration for the console and its multiplication engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from matrix_console.errors import ConfigError

from .telemetry import ENV_PREFIX, PRESETS

DEFAULT_WORKERS = 1
DEFAULT_TICK_MS = 1000


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Settings shared by the editor machine and the front-end.

    ``workers == 1`` multiplies sequentially; larger values fan the rows of
    the left matrix out over that many threads. ``tick_ms`` only drives the
    front-end refresh timer.
    """

    workers: int = DEFAULT_WORKERS
    tick_ms: int = DEFAULT_TICK_MS
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        if self.tick_ms <= 0:
            raise ConfigError(f"tick_ms must be > 0, got {self.tick_ms}")
        if self.log_preset is not None and self.log_preset not in PRESETS:
            raise ConfigError(
                f"log preset must be one of {', '.join(PRESETS)}, "
                f"got {self.log_preset!r}"
            )

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def engine_workers(self) -> Optional[int]:
        """Worker count to hand to ``multiply``; ``None`` means sequential."""

        return None if self.workers == 1 else self.workers

    def override(self, **changes: object) -> "ConsoleConfig":
        cleaned = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **cleaned)


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None or not value.strip():
        return fallback
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{key} must be an integer, got {value!r}") from exc


def load_config(env: Optional[Mapping[str, str]] = None) -> ConsoleConfig:
    """Build a ``ConsoleConfig`` from ``MATRIX_CONSOLE_*`` variables."""

    source = os.environ if env is None else env
    preset = source.get(f"{ENV_PREFIX}LOG_PRESET") or None
    return ConsoleConfig(
        workers=_env_int(source, "WORKERS", DEFAULT_WORKERS),
        tick_ms=_env_int(source, "TICK_MS", DEFAULT_TICK_MS),
        log_preset=preset,
    )


__all__ = ["ConsoleConfig", "load_config", "DEFAULT_WORKERS", "DEFAULT_TICK_MS"]
