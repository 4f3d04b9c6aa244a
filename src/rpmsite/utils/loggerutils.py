import sys
from typing import NoReturn, Optional

verbose_level = 0


def set_verbose(level: int) -> None:
    global verbose_level
    verbose_level = level


def die(msg: Optional[str], details: Optional[str]=None) -> NoReturn:
    if msg:
        print("ERROR: " + msg, file=sys.stderr)
    if details:
        print(details, file=sys.stderr)
    raise SystemExit(1)


def warn(msg: str, details: Optional[str]=None) -> None:
    print("WARNING: " + msg, file=sys.stderr)
    if details:
        print(details, file=sys.stderr)

def note(msg):
    print(msg)

def debug(msg):
    if verbose_level:
        print(msg)
