import json
import sys
from typing import Any, Dict, List, Optional

from scryptparams.api import params
from scryptparams.errors import ScryptError, ValidationError
from scryptparams.loop import WorkLoop
from scryptparams.params import MAXMEM_DEFAULT, MAXMEMFRAC_DEFAULT

from .utils import DefaultArgumentParser, configure_logging_from_args


def pick_async(maxtime: float, maxmemfrac: float, maxmem: int) -> Dict[str, int]:
    outcome: List[Any] = []

    def callback(error: Optional[Exception], result: Optional[Dict[str, int]] = None) -> None:
        outcome.append((error, result))

    with WorkLoop(max_workers=1) as loop:
        params(maxtime, maxmemfrac, maxmem, callback, loop=loop)
        loop.run()

    error, result = outcome[0]
    if error is not None:
        raise error

    return result


def main(argv: Optional[List[str]] = None) -> None:
    parser = DefaultArgumentParser(description="Pick scrypt parameters (N, r, p) for a memory and time budget")
    parser.add_argument("--maxtime", type=float, required=True, help="maximum time to spend, in seconds")
    parser.add_argument("--maxmemfrac", type=float, default=MAXMEMFRAC_DEFAULT,
                        help="maximum fraction of available memory to use")
    parser.add_argument("--maxmem", type=int, default=MAXMEM_DEFAULT,
                        help="maximum memory to use, in bytes (0: no limit)")
    parser.add_argument("--async", dest="use_async", action="store_true", help="pick the parameters on a worker thread")
    args = parser.parse_args(argv)
    configure_logging_from_args(args)

    try:
        if args.use_async:
            result = pick_async(args.maxtime, args.maxmemfrac, args.maxmem)
        else:
            result = params(args.maxtime, args.maxmemfrac, args.maxmem)

    except (ValidationError, ScryptError) as e:
        print("scrypt-params: %s" % e, file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result))
