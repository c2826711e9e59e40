import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def println(format: str = "", *args: Any):
    printf(format + "\n", *args)


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)
