import sys

from .commands import ExecutionError, ParseError, init_session, interpret
from .shared import printf_err


def repl():
    while True:
        try:
            inpt = input()
        except EOFError:
            return
        interpret(inpt)


def run_file(filepath: str):
    with open(filepath) as fp:
        result = interpret(fp.read())

    if isinstance(result, ParseError):
        sys.exit(65)
    if isinstance(result, ExecutionError):
        sys.exit(70)


def main():
    init_session()

    if len(sys.argv) == 1:
        repl()
    elif len(sys.argv) == 2:
        run_file(sys.argv[1])
    else:
        printf_err("Usage: pyads [path]\n")
        sys.exit(64)
