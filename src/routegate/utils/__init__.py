"""Utility functions and helpers."""

from routegate.utils.logging import setup_logging
from routegate.utils.metrics import metrics

__all__ = ["setup_logging", "metrics"]
