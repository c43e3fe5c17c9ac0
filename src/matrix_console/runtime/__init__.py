"""Telemetry and configuration services."""

from .config import ConsoleConfig, load_config

__all__ = ["ConsoleConfig", "load_config"]
