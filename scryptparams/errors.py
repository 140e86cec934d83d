from typing import Dict


# The error codes of the scrypt reference implementation. Only 1, 2 and 3 can be produced while picking parameters; the
# rest are listed so that any code coming out of an injected resolver still gets its proper message.
ERROR_DESCRIPTIONS: Dict[int, str] = {
    1: "getrlimit or sysctl(hw.usermem) failed",
    2: "clock_getres or clock_gettime failed",
    3: "error computing derived key",
    4: "could not read salt from /dev/urandom",
    5: "error in OpenSSL",
    6: "malloc failed",
    7: "data is not a valid scrypt-encrypted block",
    8: "unrecognized scrypt format",
    9: "decrypting file would take too much memory",
    10: "decrypting file would take too long",
    11: "password is incorrect",
    12: "error writing output file",
    13: "error reading input file",
}

UNKNOWN_ERROR = "unknown error"


def describe(code: int) -> str:
    return ERROR_DESCRIPTIONS.get(code, UNKNOWN_ERROR)


class ValidationError(TypeError):
    """The arguments to params() are missing, of the wrong type, or out of range."""
    pass


class ScryptError(Exception):
    """No parameters could be picked; the code is one of the scrypt error codes."""

    def __init__(self, code: int):
        super().__init__(describe(code))
        self.code = code

    def __repr__(self) -> str:
        return "ScryptError(%d, %r)" % (self.code, str(self))
