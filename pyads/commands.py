from dataclasses import dataclass
import enum
from typing import Any

from .debug import dump_slots
from .hash_table import HashTable
from .shared import printf_err, println
from .slot import print_value


NIL = "nil"


class Op(enum.Enum):
    SET = "set"
    GET = "get"
    HAS = "has"
    REMOVE = "remove"
    SIZE = "size"
    CLEAR = "clear"
    DUMP = "dump"
    ASSERT = "assert"


ARITY = {
    Op.SET: 2,
    Op.GET: 1,
    Op.HAS: 1,
    Op.REMOVE: 1,
    Op.SIZE: 0,
    Op.CLEAR: 0,
    Op.DUMP: 0,
    Op.ASSERT: 2,
}


@dataclass(frozen=True)
class Statement:
    op: Op
    args: tuple[str, ...]
    line: int


@dataclass
class Session:
    table: HashTable


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class ParseError:
    pass


@dataclass(frozen=True)
class ExecutionError:
    pass


@dataclass(frozen=True)
class CommandAssertionError(ExecutionError):
    pass


CommandResult = CommandOk | ParseError | ExecutionError


session: Session


def init_session():
    global session
    session = Session(table=HashTable())


def interpret(source: str) -> CommandResult:
    statements = parse(source)
    if statements is None:
        return ParseError()

    return run(statements)


def parse(source: str) -> list[Statement] | None:
    """Parses every statement of source, or returns None after reporting
    all the malformed ones."""
    statements: list[Statement] = []
    had_error = False

    for line, text in enumerate(source.splitlines(), start=1):
        for chunk in text.split(";"):
            words = chunk.split()
            if not words:
                continue

            statement = parse_statement(words, line)
            if statement is None:
                had_error = True
            else:
                statements.append(statement)

    return None if had_error else statements


def parse_statement(words: list[str], line: int) -> Statement | None:
    try:
        op = Op(words[0])
    except ValueError:
        error_at(line, "Unknown statement '{0:s}'.", words[0])
        return None

    args = tuple(words[1:])
    if len(args) != ARITY[op]:
        error_at(
            line,
            "'{0:s}' expects {1:d} arguments but got {2:d}.",
            op.value,
            ARITY[op],
            len(args),
        )
        return None

    return Statement(op, args, line)


def run(statements: list[Statement]) -> CommandResult:
    table = session.table

    for statement in statements:
        args = statement.args
        match statement.op:
            case Op.SET:
                table.set(args[0], args[1])
            case Op.GET:
                value, _ = table.get(args[0])
                print_value(value)
                println()
            case Op.HAS:
                print_value(table.contains(args[0]))
                println()
            case Op.REMOVE:
                table.remove(args[0])
            case Op.SIZE:
                println("{0:d}", table.size())
            case Op.CLEAR:
                table.clear()
            case Op.DUMP:
                dump_slots(table.slots, "table")
            case Op.ASSERT:
                key, expected = args
                value, found = table.get(key)
                if not value_matches(value, found, expected):
                    runtime_error(
                        statement,
                        "Assertion failed: {0:s} is {1:s}, expected {2:s}.",
                        key,
                        value if found else NIL,
                        expected,
                    )
                    return CommandAssertionError()

    return CommandOk()


def value_matches(value: Any, found: bool, expected: str) -> bool:
    if expected == NIL:
        return not found
    return found and value == expected


def error_at(line: int, format: str, *args: Any):
    printf_err("[line {0:d}] Error: ", line)
    printf_err(format, *args)
    printf_err("\n")


def runtime_error(statement: Statement, format: str, *args: Any):
    printf_err(format, *args)
    printf_err("\n")
    printf_err("[line {0:d}] in script\n", statement.line)
