"""Runtime layer: concurrency joins and observability."""

from .concurrency import Settled, SettledStatus, gather, gather_settled, resolve

__all__ = ["Settled", "SettledStatus", "gather", "gather_settled", "resolve"]
