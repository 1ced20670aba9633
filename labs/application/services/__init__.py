"""Application services shared by several use cases."""

from .notifier import Notifier

__all__ = ["Notifier"]
