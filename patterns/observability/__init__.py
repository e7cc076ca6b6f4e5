"""Observability: logging for channel and registry events."""

from patterns.observability.logger import get_logger

__all__ = ["get_logger"]
