from .api import params, resolve_async, resolve_sync
from .errors import ScryptError, ValidationError
from .loop import WorkLoop, default_loop

__all__ = [
    "params",
    "resolve_async",
    "resolve_sync",
    "ScryptError",
    "ValidationError",
    "WorkLoop",
    "default_loop",
]
