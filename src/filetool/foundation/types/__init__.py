"""Shared value types."""

from filetool.foundation.types.casing import CasingPolicy

__all__ = ["CasingPolicy"]
