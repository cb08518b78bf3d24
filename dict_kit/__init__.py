"""dict-kit - dot-notation access, array helpers, config store and collections"""

from ._version import version as __version__
from .arrays import SortFlag, multi, single
from .config import Config, HookedConfig, load_config_file
from .errors import ConfigLoadError, DictKitError, InvalidInvocationError, TypeMismatchError
from .functions import array_get, array_set, collect, compare, is_callable
from .hooks import HookRegistry
from .mappings import Collection, HookedCollection, Pipeline


__all__ = [
    "Collection",
    "Config",
    "ConfigLoadError",
    "DictKitError",
    "HookRegistry",
    "HookedCollection",
    "HookedConfig",
    "InvalidInvocationError",
    "Pipeline",
    "SortFlag",
    "TypeMismatchError",
    "__version__",
    "array_get",
    "array_set",
    "collect",
    "compare",
    "is_callable",
    "load_config_file",
    "multi",
    "single",
]
