"""Observability module for logging."""

from two_card_poker.observability.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
