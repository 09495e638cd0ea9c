"""Strategy module for computer players."""

from gandengyan_server.strategy.base import Strategy
from gandengyan_server.strategy.simple import SimpleStrategy

__all__ = ["Strategy", "SimpleStrategy"]
