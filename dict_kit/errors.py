"""Exception types raised by dict-kit."""

from __future__ import annotations


class DictKitError(Exception):
    """Base class for all dict-kit errors."""


class TypeMismatchError(DictKitError, TypeError):
    """A resolved value or container node does not have the requested type."""


class InvalidInvocationError(DictKitError, AttributeError):
    """An operation name is not part of the collection pipeline."""


class ConfigLoadError(DictKitError, ValueError):
    """A configuration source could not be parsed into a mapping."""
