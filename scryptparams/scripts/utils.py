import argparse
import logging
import sys
import tempfile
from pathlib import Path
from time import time
from typing import Any


class DefaultArgumentParser(argparse.ArgumentParser):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.add_argument("--log-to-file", help="Log to file", action="store_true")
        self.add_argument("--log-to-stdout", help="Log to stdout", action="store_true")


def configure_logging_for_file() -> None:
    log_filename = Path(tempfile.gettempdir()) / ("scrypt-params-%s.log" % int(time()))
    print('Logging to file: %s' % log_filename, file=sys.stderr)
    FORMAT = '%(asctime)s %(name)s %(message)s'
    logging.basicConfig(format=FORMAT, stream=open(log_filename, "w"), level=logging.INFO)


def configure_logging_for_stdout() -> None:
    FORMAT = "%(asctime)s %(name)s %(message)s"
    logging.basicConfig(format=FORMAT, stream=sys.stdout, level=logging.INFO)


def configure_logging_from_args(args: Any) -> None:
    if args.log_to_file:
        configure_logging_for_file()

    if args.log_to_stdout:
        configure_logging_for_stdout()
