from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scrypt-params")
except PackageNotFoundError:
    __version__ = "unknown"


def main() -> None:
    print(__version__)
