"""k1s0 error bag library."""

from .bag import ErrorBag
from .config import ErrorBagConfig, parse_config
from .exceptions import ErrorBagError, ErrorBagErrorCodes
from .models import ErrorEntry, FieldSelector
from .selector import parse_selector

__all__ = [
    "ErrorBag",
    "ErrorEntry",
    "FieldSelector",
    "parse_selector",
    "ErrorBagConfig",
    "parse_config",
    "ErrorBagError",
    "ErrorBagErrorCodes",
]
