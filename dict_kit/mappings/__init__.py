"""Collection wrapper and its operation pipeline."""

from .collection import Collection, HookedCollection
from .pipeline import Pipeline


__all__ = ["Collection", "HookedCollection", "Pipeline"]
