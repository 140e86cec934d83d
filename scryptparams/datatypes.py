from __future__ import annotations

from typing import Any, Callable, Dict, Union

from .params import MAXMEM_DEFAULT, MAXMEMFRAC_DEFAULT

Continuation = Callable[..., Any]


class ParameterRequest:
    """The budgets to pick parameters for, with defaults already applied."""

    def __init__(self, maxtime: float, maxmemfrac: float = MAXMEMFRAC_DEFAULT, maxmem: int = MAXMEM_DEFAULT):
        if not maxtime > 0:
            raise ValueError("ParameterRequest maxtime must be greater than 0.")

        if not maxmemfrac > 0:
            raise ValueError("ParameterRequest maxmemfrac must be greater than 0.")

        if maxmem < 0:
            raise ValueError("ParameterRequest maxmem must not be negative.")

        self.maxtime = float(maxtime)
        self.maxmemfrac = float(maxmemfrac)
        self.maxmem = int(maxmem)

    def __repr__(self) -> str:
        return "ParameterRequest(maxtime=%r, maxmemfrac=%r, maxmem=%r)" % (self.maxtime, self.maxmemfrac, self.maxmem)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ParameterRequest) and
            self.maxtime == other.maxtime and
            self.maxmemfrac == other.maxmemfrac and
            self.maxmem == other.maxmem
        )

    def copy(self) -> ParameterRequest:
        return ParameterRequest(self.maxtime, self.maxmemfrac, self.maxmem)


class Sync:
    def __repr__(self) -> str:
        return "SYNC"


SYNC = Sync()


class Async:
    """Asynchronous mode; the continuation is invoked once when the parameters have been picked."""

    def __init__(self, continuation: Continuation):
        self.continuation = continuation

    def __repr__(self) -> str:
        return "Async(%r)" % (self.continuation,)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Async) and self.continuation is other.continuation


ExecutionMode = Union[Sync, Async]


class ResultTriple:

    __slots__ = ("N", "r", "p")

    def __init__(self, N: int, r: int, p: int):
        if not (0 <= r <= 0xffffffff) or not (0 <= p <= 0xffffffff):
            raise ValueError("ResultTriple r and p must fit in 32 bits.")

        object.__setattr__(self, "N", N)
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "p", p)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ResultTriple is immutable")

    def __repr__(self) -> str:
        return "ResultTriple(N=%d, r=%d, p=%d)" % (self.N, self.r, self.p)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ResultTriple) and (self.N, self.r, self.p) == (other.N, other.r, other.p)

    def __hash__(self) -> int:
        return hash((self.N, self.r, self.p))

    def encode(self) -> Dict[str, int]:
        return encode(self.N, self.r, self.p)


def encode(N: int, r: int, p: int) -> Dict[str, int]:
    """The structure handed to callers, from either calling convention."""
    return {"N": N, "r": r, "p": p}
