"""Shared utilities for jsscan."""

from .logger import get_logger

__all__ = ["get_logger"]
