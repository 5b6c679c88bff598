"""
LRU cache engine package.

This package hosts the fixed-capacity LRU cache engine, its configuration
models, logging setup, and a small demonstration driver. See README.md for
usage.
"""

from .__version__ import __version__
from .engine import CacheStats, InvalidConfiguration, LRUCache

__all__ = ["__version__", "CacheStats", "InvalidConfiguration", "LRUCache"]
