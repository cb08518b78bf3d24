"""Single- and multi-dimensional array helpers."""

from . import multi, single
from .base import SortFlag, compare, is_multi_dimensional, unwrap, wrap


__all__ = ["SortFlag", "compare", "is_multi_dimensional", "multi", "single", "unwrap", "wrap"]
