import threading

import pytest

from scryptparams.datatypes import ParameterRequest
from scryptparams.errors import ScryptError
from scryptparams.executors import WorkUnit, complete, execute, run_async, run_sync
from scryptparams.loop import WorkLoop

from tests.stubs import RecordingCallback, StubResolver


def test_run_sync():
    resolver = StubResolver((16384, 8, 1))
    assert run_sync(ParameterRequest(5.0, 0.25, 1024), resolver) == {"N": 16384, "r": 8, "p": 1}
    assert resolver.calls == [(1024, 0.25, 5.0)]


def test_run_sync_failure():
    with pytest.raises(ScryptError) as excinfo:
        run_sync(ParameterRequest(5.0), StubResolver(error_code=1))

    assert excinfo.value.code == 1
    assert str(excinfo.value) == "getrlimit or sysctl(hw.usermem) failed"


def test_work_unit_copies_the_request():
    request = ParameterRequest(5.0)
    unit = WorkUnit(request, RecordingCallback(), StubResolver(), WorkLoop(max_workers=1))
    assert unit.request == request
    assert unit.request is not request


def test_execute_does_not_call_the_continuation():
    callback = RecordingCallback()
    unit = WorkUnit(ParameterRequest(5.0), callback, StubResolver((1024, 8, 2)), WorkLoop(max_workers=1))

    execute(unit)

    assert callback.calls == []
    assert unit.result is not None
    assert unit.result.encode() == {"N": 1024, "r": 8, "p": 2}
    assert unit.error_code is None


def test_execute_error_code():
    unit = WorkUnit(ParameterRequest(5.0), RecordingCallback(), StubResolver(error_code=3), WorkLoop(max_workers=1))

    execute(unit)

    assert unit.result is None
    assert unit.error_code == 3


def test_complete_success():
    callback = RecordingCallback()
    unit = WorkUnit(ParameterRequest(5.0), callback, StubResolver((1024, 8, 2)), WorkLoop(max_workers=1))
    execute(unit)

    complete(unit, None)

    assert callback.calls == [(None, {"N": 1024, "r": 8, "p": 2})]
    assert unit.released
    assert unit.request is None and unit.result is None


def test_complete_error():
    callback = RecordingCallback()
    unit = WorkUnit(ParameterRequest(5.0), callback, StubResolver(error_code=3), WorkLoop(max_workers=1))
    execute(unit)

    complete(unit, None)

    assert len(callback.calls) == 1
    (error,) = callback.calls[0]
    assert isinstance(error, ScryptError)
    assert error.code == 3
    assert unit.released


def test_complete_after_unexpected_failure():
    callback = RecordingCallback()
    unit = WorkUnit(ParameterRequest(5.0), callback, StubResolver(), WorkLoop(max_workers=1))
    failure = ValueError("resolver bug")

    complete(unit, failure)

    assert callback.calls == [(failure,)]
    assert unit.released


def test_complete_when_the_continuation_raises():
    uncaught = []
    loop = WorkLoop(max_workers=1, uncaught_exception_handler=uncaught.append)
    failure = RuntimeError("caller's handler is broken")
    callback = RecordingCallback(raises=failure)
    unit = WorkUnit(ParameterRequest(5.0), callback, StubResolver(), loop)
    execute(unit)

    complete(unit, None)

    assert len(callback.calls) == 1
    assert uncaught == [failure]
    assert unit.released


def test_run_async():
    resolver = StubResolver((16384, 8, 1))
    callback = RecordingCallback()

    with WorkLoop() as loop:
        assert run_async(ParameterRequest(5.0, 0.25, 1024), callback, resolver, loop) is None
        loop.run(timeout=10)

    assert resolver.calls == [(1024, 0.25, 5.0)]
    assert callback.calls == [(None, {"N": 16384, "r": 8, "p": 1})]


def test_run_async_does_not_block():
    release = threading.Event()

    def slow_resolver(maxmem, maxmemfrac, maxtime):
        release.wait(10)
        return 1024, 8, 1

    callback = RecordingCallback()

    with WorkLoop() as loop:
        run_async(ParameterRequest(5.0), callback, slow_resolver, loop)
        assert callback.calls == []

        release.set()
        loop.run(timeout=10)

    assert callback.calls == [(None, {"N": 1024, "r": 8, "p": 1})]


def test_run_async_many():
    callbacks = [RecordingCallback() for i in range(20)]

    with WorkLoop(max_workers=4) as loop:
        for i, callback in enumerate(callbacks):
            run_async(ParameterRequest(5.0), callback, StubResolver((1 << (i + 1), 8, 1)), loop)
        loop.run(timeout=10)

    for i, callback in enumerate(callbacks):
        assert callback.calls == [(None, {"N": 1 << (i + 1), "r": 8, "p": 1})]
