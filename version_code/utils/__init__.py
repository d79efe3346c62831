"""Utility helpers for `version_code`.

Group reusable, non-IO core utilities here to keep concerns separate.
"""

from .helpers import join_names, split_dotted

__all__ = ["join_names", "split_dotted"]
