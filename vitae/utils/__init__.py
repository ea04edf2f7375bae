"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Timestamps
"""

from vitae.utils.timestamp import now

__all__ = ["now"]
