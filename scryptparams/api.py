from typing import Any, Dict, Optional

from .classifier import classify, make_request
from .datatypes import Async, Continuation
from .errors import ValidationError
from .executors import Resolver, run_async, run_sync
from .loop import WorkLoop, default_loop
from .params import MAXMEM_DEFAULT, MAXMEMFRAC_DEFAULT
from .pickparams import pickparams


def resolve_sync(
    maxtime: float,
    maxmemfrac: float = MAXMEMFRAC_DEFAULT,
    maxmem: int = MAXMEM_DEFAULT,
    resolver: Resolver = pickparams,
) -> Dict[str, int]:
    """Pick {N, r, p} on the calling thread. Raises ValidationError or ScryptError."""
    return run_sync(make_request(maxtime, maxmemfrac, maxmem), resolver)


def resolve_async(
    callback: Continuation,
    maxtime: float,
    maxmemfrac: float = MAXMEMFRAC_DEFAULT,
    maxmem: int = MAXMEM_DEFAULT,
    resolver: Resolver = pickparams,
    loop: Optional[WorkLoop] = None,
) -> None:
    """Pick {N, r, p} on a worker thread; callback(None, result) or callback(error) is run by the thread driving loop.

    Without a loop, default_loop() is used, which runs callbacks on its own completion thread. A loop of your own only
    calls back when you drive it with run() or run_once(), or when it is closed.

    Bad arguments raise ValidationError right here; the callback is not called for them.
    """
    if not callable(callback):
        raise ValidationError("callback must be callable")

    request = make_request(maxtime, maxmemfrac, maxmem)
    run_async(request, callback, resolver, loop if loop is not None else default_loop())


def params(*args: Any, resolver: Resolver = pickparams, loop: Optional[WorkLoop] = None) -> Optional[Dict[str, int]]:
    """params(maxtime[, maxmemfrac[, maxmem]][, callback])

    Without a callback, returns {N, r, p} or raises. With one, returns None and calls it later on the loop's
    completion thread (see resolve_async() for which thread that is).
    """
    request, mode = classify(args)

    if isinstance(mode, Async):
        run_async(request, mode.continuation, resolver, loop if loop is not None else default_loop())
        return None

    return run_sync(request, resolver)
