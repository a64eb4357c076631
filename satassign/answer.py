"""Reading assignment files in the competition answer format and rendering status lines."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "AnswerError",
    "UnsatisfiableAnswer",
    "IllegalAnswerFormat",
    "read_assignment",
    "status_line",
]

RED = "\x1b[001m\x1b[031m"
GREEN = "\x1b[001m\x1b[032m"
BLUE = "\x1b[001m\x1b[034m"
RESET = "\x1b[000m"


class AnswerError(ValueError):
    """An answer stream could not be read as an assignment."""


class UnsatisfiableAnswer(AnswerError):
    """The answer declares the problem unsatisfiable, so it carries no assignment."""

    def __init__(self, cnf_name: str) -> None:
        super().__init__(f"{cnf_name} seems an unsatisfiable problem. I can't handle it.")
        self.cnf_name = cnf_name


class IllegalAnswerFormat(AnswerError):
    """The answer file has a status line that is neither SAT nor UNSAT."""

    def __init__(self, assign_name: str) -> None:
        super().__init__(f"{assign_name} seems an illegal format file.")
        self.assign_name = assign_name


def read_assignment(
    stream: Iterable[str], cnf_name: str, assign_name: str | None = None
) -> list[int]:
    """Return the literals of the first ``v`` line in ``stream``.

    Comment lines and an ``s SATISFIABLE`` line are skipped.  An empty list is
    returned when the stream ends before any ``v`` line.  Parsing of a ``v``
    line stops at the literal ``0``.
    """
    for line in stream:
        if line.startswith("c"):
            continue
        if line.startswith("s "):
            if line.startswith("s SATISFIABLE"):
                continue
            if line.startswith("s UNSATISFIABLE"):
                raise UnsatisfiableAnswer(cnf_name)
            if assign_name is not None:
                raise IllegalAnswerFormat(assign_name)
            raise AnswerError("Failed to parse here: ")
        if line.startswith("v "):
            lits: list[int] = []
            for token in line[2:].split():
                try:
                    lit = int(token)
                except ValueError as exc:
                    raise AnswerError(f"{exc} by {token}") from exc
                if lit == 0:
                    break
                lits.append(lit)
            return lits
        raise AnswerError(f"Failed to parse here: {line}")
    return []


def status_line(result: object, no_color: bool = False) -> str:
    """Return the ``s`` line for a result: ``True`` is SAT, ``False`` UNSAT, anything else UNKNOWN."""
    if result is True:
        text, color = "s SATISFIABLE", GREEN
    elif result is False:
        text, color = "s UNSATISFIABLE", BLUE
    else:
        text, color = "s UNKNOWN", RED
    if no_color:
        return text
    return f"{color}{text}{RESET}"