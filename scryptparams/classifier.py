"""
Turns the loosely typed argument list of params() into a ParameterRequest and a calling convention.

The accepted shapes are

    params(maxtime)
    params(maxtime, maxmemfrac)
    params(maxtime, maxmemfrac, maxmem)

each optionally followed by a callback, which makes the call asynchronous. The callback ends the argument list: whatever
comes after it is ignored. Likewise anything after maxmem that isn't a callback is ignored, not rejected; older callers
pass extra arguments and we don't want to break them.
"""

import math
import numbers
from decimal import Decimal
from typing import Any, Sequence, Tuple

from .datatypes import SYNC, Async, ExecutionMode, ParameterRequest
from .errors import ValidationError
from .params import MAXMEM_DEFAULT, MAXMEMFRAC_DEFAULT


def is_number(value: Any) -> bool:
    # bool is a subclass of int, but params(True) is a mistake rather than a maxtime of 1 second. Decimal is not
    # registered as a numbers.Real, so it is listed separately.
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def validate_maxtime(value: Any) -> float:
    if not is_number(value):
        raise ValidationError("maxtime argument must be a number")

    # written as "not > 0" so that NaN is rejected as well
    maxtime = float(value)
    if not maxtime > 0:
        raise ValidationError("maxtime must be greater than 0")

    return maxtime


def validate_maxmemfrac(value: Any) -> float:
    if not is_number(value):
        raise ValidationError("maxmemfrac argument must be a number")

    maxmemfrac = float(value)
    if not maxmemfrac > 0:
        return MAXMEMFRAC_DEFAULT

    return maxmemfrac


def validate_maxmem(value: Any) -> int:
    if not is_number(value):
        raise ValidationError("maxmem argument must be a number")

    if not math.isfinite(value) or value < 0:
        return MAXMEM_DEFAULT

    return int(value)


def make_request(maxtime: Any, maxmemfrac: Any = MAXMEMFRAC_DEFAULT, maxmem: Any = MAXMEM_DEFAULT) -> ParameterRequest:
    return ParameterRequest(validate_maxtime(maxtime), validate_maxmemfrac(maxmemfrac), validate_maxmem(maxmem))


def classify(args: Sequence[Any]) -> Tuple[ParameterRequest, ExecutionMode]:
    if len(args) == 0:
        raise ValidationError("Wrong number of arguments: At least one argument is needed - the maxtime")

    if callable(args[0]):
        raise ValidationError(
            "Wrong number of arguments: At least one argument is needed before the callback - the maxtime")

    maxtime = validate_maxtime(args[0])
    maxmemfrac = MAXMEMFRAC_DEFAULT
    maxmem = MAXMEM_DEFAULT
    mode: ExecutionMode = SYNC

    for i, arg in enumerate(args[1:], start=1):
        if callable(arg):
            mode = Async(arg)
            break

        if i == 1:
            maxmemfrac = validate_maxmemfrac(arg)

        elif i == 2:
            maxmem = validate_maxmem(arg)

    return ParameterRequest(maxtime, maxmemfrac, maxmem), mode
