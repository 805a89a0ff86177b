"""Multi-step workflows driven through page objects."""

from .search import SearchFlow

__all__ = ["SearchFlow"]
