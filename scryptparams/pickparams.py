"""
Picking scrypt parameters for a given memory and time budget

This follows the reference scrypt `pickparams`: find out how much memory we may use, find out how many salsa20/8 cores
this machine computes per second, and choose N, r and p such that 128 * N * r bytes fit in the memory limit while
4 * N * r * p cores fit in the time limit.

The memory and CPU measurements are plain functions so that callers (and tests) can swap them out; the arithmetic lives in
choose_params(), which doesn't look at the machine at all.
"""

import logging
import os
import sys
import time
from typing import Callable, List, Tuple

from scrypt import error as scrypt_error, hash as scrypt_hash

from .errors import ScryptError
from .params import (
    CPUPERF_CORES_PER_CALL,
    CPUPERF_MIN_MEASURE_TIME,
    CPUPERF_N,
    FIXED_R,
    MAX_LOG_N,
    MAX_MEMFRAC,
    MAX_RP,
    MIN_MEMLIMIT,
    MIN_OPSLIMIT,
)

if sys.platform != "win32":
    import resource

logger = logging.getLogger("scryptparams.pickparams")


def get_physical_memory() -> int:
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        raise ScryptError(1)


def get_resource_limits() -> List[int]:
    if sys.platform == "win32":
        return []

    limits = []
    for name in ("RLIMIT_AS", "RLIMIT_DATA"):
        if not hasattr(resource, name):
            continue

        try:
            soft, _ = resource.getrlimit(getattr(resource, name))
        except (ValueError, OSError):
            raise ScryptError(1)

        if soft != resource.RLIM_INFINITY:
            limits.append(soft)

    return limits


def get_memlimit() -> int:
    """The amount of memory this process could use: the smaller of physical memory and its resource limits."""
    return min([get_physical_memory()] + get_resource_limits())


def memtouse(maxmem: int, maxmemfrac: float, sysmemlimit: int) -> int:
    if maxmemfrac > MAX_MEMFRAC or maxmemfrac == 0:
        maxmemfrac = MAX_MEMFRAC

    memavail = int(maxmemfrac * sysmemlimit)

    if maxmem > 0 and memavail > maxmem:
        memavail = maxmem

    return max(memavail, MIN_MEMLIMIT)


def _scrypt_once(N: int) -> None:
    try:
        scrypt_hash(b"", b"", N=N, r=1, p=1, buflen=16)
    except scrypt_error as e:
        logger.warning("scrypt(N=%d, r=1, p=1) failed while measuring CPU speed: %s" % (N, e))
        raise ScryptError(3) from e


def cpuperf(clock_name: str = "perf_counter") -> float:
    """Salsa20/8 cores per second, timed with the named clock from the time module."""

    try:
        resolution = time.get_clock_info(clock_name).resolution
    except ValueError as e:
        raise ScryptError(2) from e

    clock = getattr(time, clock_name)
    measure_time = max(resolution, CPUPERF_MIN_MEASURE_TIME)

    # Loop until the clock ticks, so that we start measuring right at the start of a tick.
    start = clock()
    while True:
        _scrypt_once(16)
        now = clock()
        if now - start > 0:
            break

    cores = 0
    start = clock()
    while True:
        _scrypt_once(CPUPERF_N)
        cores += CPUPERF_CORES_PER_CALL

        elapsed = clock() - start
        if elapsed < 0:
            raise ScryptError(2)

        if elapsed > measure_time:
            break

    return cores / elapsed


def choose_params(memlimit: int, opslimit: float) -> Tuple[int, int, int]:
    opslimit = max(opslimit, MIN_OPSLIMIT)
    r = FIXED_R

    # The memory limit requires that 128Nr <= memlimit, while the CPU limit requires that 4Nrp <= opslimit. If
    # opslimit < memlimit/32, opslimit imposes the stronger limit on N.
    if opslimit < memlimit / 32:
        p = 1
        log_n = _pick_log_n(opslimit / (r * 4))

    else:
        log_n = _pick_log_n(memlimit / (r * 128))

        # with N set by memory, spend the remaining CPU budget on p
        maxrp = min((opslimit / 4) / (1 << log_n), MAX_RP)
        p = int(maxrp) // r

    return 1 << log_n, r, p


def _pick_log_n(max_n: float) -> int:
    log_n = 1
    while log_n < MAX_LOG_N:
        if (1 << log_n) > max_n / 2:
            break
        log_n += 1
    return log_n


def pickparams(
    maxmem: int,
    maxmemfrac: float,
    maxtime: float,
    get_memlimit: Callable[[], int] = get_memlimit,
    cpuperf: Callable[[], float] = cpuperf,
) -> Tuple[int, int, int]:

    memlimit = memtouse(maxmem, maxmemfrac, get_memlimit())

    opps = cpuperf()
    N, r, p = choose_params(memlimit, opps * maxtime)

    logger.info("pickparams(maxmem=%d, maxmemfrac=%s, maxtime=%s): memlimit=%d, %.0f cores/s -> N=%d r=%d p=%d" % (
        maxmem, maxmemfrac, maxtime, memlimit, opps, N, r, p))

    return N, r, p
