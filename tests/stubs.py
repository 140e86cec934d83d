from typing import Any, List, Optional, Tuple

from scryptparams.errors import ScryptError


class StubResolver:
    """Returns a fixed outcome, and remembers what it was asked."""

    def __init__(self, result: Tuple[int, int, int] = (16384, 8, 1), error_code: Optional[int] = None):
        self.result = result
        self.error_code = error_code
        self.calls: List[Tuple[int, float, float]] = []

    def __call__(self, maxmem: int, maxmemfrac: float, maxtime: float) -> Tuple[int, int, int]:
        self.calls.append((maxmem, maxmemfrac, maxtime))

        if self.error_code is not None:
            raise ScryptError(self.error_code)

        return self.result


class RecordingCallback:

    def __init__(self, raises: Optional[Exception] = None):
        self.raises = raises
        self.calls: List[Tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

        if self.raises is not None:
            raise self.raises
