from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .datatypes import Continuation, ParameterRequest, ResultTriple
from .errors import ScryptError
from .loop import WorkLoop

Resolver = Callable[[int, float, float], Tuple[int, int, int]]

logger = logging.getLogger("scryptparams.executors")


def run_sync(request: ParameterRequest, resolver: Resolver) -> Dict[str, int]:
    N, r, p = resolver(request.maxmem, request.maxmemfrac, request.maxtime)
    return ResultTriple(N, r, p).encode()


class WorkUnit:
    """Everything an asynchronous request needs between being queued and its callback being called.

    Owned by one thread at a time: the submitter creates it, a worker fills in the outcome, and the thread driving
    the loop calls the continuation and releases it (by leaving the `with` block).
    """

    def __init__(self, request: ParameterRequest, continuation: Continuation, resolver: Resolver, loop: WorkLoop):
        self.request: Optional[ParameterRequest] = request.copy()
        self.continuation: Optional[Continuation] = continuation
        self.resolver: Optional[Resolver] = resolver
        self.loop = loop

        self.result: Optional[ResultTriple] = None
        self.error_code: Optional[int] = None

    def __repr__(self) -> str:
        return "WorkUnit(%r, result=%r, error_code=%r)" % (self.request, self.result, self.error_code)

    def __enter__(self) -> WorkUnit:
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self.continuation is None

    def release(self) -> None:
        self.request = None
        self.continuation = None
        self.resolver = None
        self.result = None
        self.error_code = None


def execute(unit: WorkUnit) -> None:
    # runs on a worker thread: the continuation is not to be touched here
    assert unit.request is not None and unit.resolver is not None

    try:
        N, r, p = unit.resolver(unit.request.maxmem, unit.request.maxmemfrac, unit.request.maxtime)
    except ScryptError as e:
        unit.error_code = e.code
        return

    unit.result = ResultTriple(N, r, p)


def complete(unit: WorkUnit, error: Optional[BaseException]) -> None:
    with unit:
        assert unit.continuation is not None
        continuation = unit.continuation

        if error is not None:
            # execute() itself blew up; the callback still hears about it, exactly once
            logger.warning("Picking parameters for %r failed unexpectedly: %r" % (unit.request, error))
            args: Tuple[Any, ...] = (error,)

        elif unit.error_code is not None:
            args = (ScryptError(unit.error_code),)

        else:
            assert unit.result is not None
            args = (None, unit.result.encode())

        try:
            continuation(*args)
        except Exception as e:
            unit.loop.report_uncaught(e)


def run_async(request: ParameterRequest, continuation: Continuation, resolver: Resolver, loop: WorkLoop) -> None:
    unit = WorkUnit(request, continuation, resolver, loop)
    loop.queue_work(unit, execute, complete)
