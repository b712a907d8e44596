"""Utility helpers shared across layers."""

from .datetime import app_timezone, local_now, to_local_naive, window_start

__all__ = ["app_timezone", "local_now", "to_local_naive", "window_start"]
