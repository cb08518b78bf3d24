"""Dot-notation path parsing and resolution."""

from .parser import join_path, split_path
from .resolver import (
    all_items,
    expand_paths,
    fill_path,
    flatten_paths,
    forget_path,
    get_array,
    get_bool,
    get_float,
    get_int,
    get_path,
    get_str,
    has_any_path,
    has_path,
    offset_exists,
    offset_get,
    offset_set,
    offset_unset,
    pluck_paths,
    set_path,
    tap,
)


__all__ = [
    "all_items",
    "expand_paths",
    "fill_path",
    "flatten_paths",
    "forget_path",
    "get_array",
    "get_bool",
    "get_float",
    "get_int",
    "get_path",
    "get_str",
    "has_any_path",
    "has_path",
    "join_path",
    "offset_exists",
    "offset_get",
    "offset_set",
    "offset_unset",
    "pluck_paths",
    "set_path",
    "split_path",
    "tap",
]
