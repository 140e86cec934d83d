"""
A small work loop: blocking work runs on a pool of worker threads, and its completion is handed back to whichever
thread drives the loop (by calling run() or run_once(), or a CompletionThread started by start_in_background()).

The split matters to callers of the asynchronous API: their callbacks are only ever run by the thread that drives the
loop, one at a time, never by a worker. The data belonging to a request is handed from the worker to that thread
through the completion queue; neither side holds on to it after passing it on.
"""

from __future__ import annotations

import logging
import threading
import traceback
from concurrent.futures import Future, ThreadPoolExecutor
from queue import Empty, Queue
from typing import Any, Callable, Optional, Tuple

from .params import COMPLETION_POLL_INTERVAL

Work = Callable[[Any], None]
AfterWork = Callable[[Any, Optional[BaseException]], None]
UncaughtExceptionHandler = Callable[[BaseException], None]

Completion = Tuple[Any, AfterWork, Optional[BaseException]]


class WorkLoop:

    def __init__(
        self,
        max_workers: Optional[int] = None,
        uncaught_exception_handler: Optional[UncaughtExceptionHandler] = None,
    ):
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="scryptparams-worker")
        self.completions: Queue[Completion] = Queue()
        self.lock = threading.Lock()
        self.pending = 0
        self.closed = False
        self.completion_thread: Optional[CompletionThread] = None

        self.logger = logging.getLogger("scryptparams.loop")
        self.uncaught_exception_handler = uncaught_exception_handler or self.log_uncaught_exception

    def __enter__(self) -> WorkLoop:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def queue_work(self, data: Any, work: Work, after_work: AfterWork) -> None:
        """Run work(data) on a worker thread; afterwards after_work(data, error) runs on the thread driving the loop.

        error is None unless work() raised, in which case it is the exception raised.
        """
        with self.lock:
            if self.closed:
                raise RuntimeError("WorkLoop is closed")
            self.pending += 1

        try:
            future = self.executor.submit(work, data)
        except RuntimeError:
            # close() got in between; this request never made it into the loop
            with self.lock:
                self.pending -= 1
            raise

        def done(f: Future) -> None:
            self.completions.put((data, after_work, f.exception()))

        future.add_done_callback(done)

    def run_once(self, timeout: Optional[float] = None) -> bool:
        """Run at most one completion, waiting up to timeout seconds for it. Returns whether one was run."""
        if self.completion_thread is not None and threading.current_thread() is not self.completion_thread:
            raise RuntimeError("WorkLoop is driven by its own completion thread")

        try:
            data, after_work, error = self.completions.get(timeout=timeout)
        except Empty:
            return False

        try:
            after_work(data, error)
        except Exception as e:
            self.report_uncaught(e)
        finally:
            with self.lock:
                self.pending -= 1

        return True

    def run(self, timeout: Optional[float] = None) -> None:
        """Run completions until no work is pending. With a timeout, give up waiting after that many seconds."""
        while self.pending > 0:
            if not self.run_once(timeout) and timeout is not None:
                raise TimeoutError("%d request(s) still pending after %ss" % (self.pending, timeout))

    def start_in_background(self) -> CompletionThread:
        """Drive the loop from a thread of its own; run() and run_once() are off limits from then on."""
        with self.lock:
            if self.completion_thread is None:
                self.completion_thread = CompletionThread(self)
                self.completion_thread.start()
            return self.completion_thread

    def report_uncaught(self, exception: BaseException) -> None:
        try:
            self.uncaught_exception_handler(exception)
        except Exception:
            # the handler of last resort failed; all we have left is the log
            self.logger.error("Uncaught exception in uncaught exception handler")
            self.logger.error(traceback.format_exc())

    def log_uncaught_exception(self, exception: BaseException) -> None:
        self.logger.error("Uncaught exception in WorkLoop completion")
        self.logger.error("".join(traceback.format_exception(type(exception), exception, exception.__traceback__)))

    def close(self) -> None:
        """Stop accepting work, wait for the workers, and run the completions that are still pending."""
        with self.lock:
            self.closed = True
        self.executor.shutdown(wait=True)

        if self.completion_thread is not None:
            self.completion_thread.join()
        else:
            self.run()


class CompletionThread(threading.Thread):
    """Runs the completions of a WorkLoop until it is closed and drained."""

    def __init__(self, loop: WorkLoop):
        super().__init__(name="scryptparams-completions")
        self.daemon = True
        self.loop = loop

    def run(self) -> None:
        while not (self.loop.closed and self.loop.pending == 0):
            self.loop.run_once(timeout=COMPLETION_POLL_INTERVAL)


_default_loop: Optional[WorkLoop] = None
_default_loop_lock = threading.Lock()


def default_loop() -> WorkLoop:
    """The loop used when no loop is passed in; it is driven by its own completion thread, so callbacks passed to
    params() or resolve_async() run on that thread without the caller having to call run()."""
    global _default_loop

    with _default_loop_lock:
        if _default_loop is None:
            _default_loop = WorkLoop()
            _default_loop.start_in_background()
        return _default_loop
