"""Utility modules for Tiza.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from tiza.utils.hashing import hash_str
from tiza.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
